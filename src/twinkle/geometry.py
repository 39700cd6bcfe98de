from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in view coordinates (y grows downwards)."""

    x: float
    y: float
    width: float
    height: float
