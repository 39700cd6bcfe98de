from dataclasses import dataclass

import cv2
import numpy as np

from twinkle.geometry import Rect

# Fractional bits used for subpixel particle outlines
PATH_SHIFT = 4


@dataclass(frozen=True)
class Particle:
    """An oval inscribed in a rectangle. The visual footprint of one particle."""

    rect: Rect

    @property
    def center(self):
        return (
            self.rect.x + self.rect.width / 2,
            self.rect.y + self.rect.height / 2,
        )

    @property
    def axes(self):
        """Semi-axes (horizontal, vertical)."""
        return (self.rect.width / 2, self.rect.height / 2)

    def contains(self, x, y):
        """Check if the point lies inside (or on) the oval."""
        cx, cy = self.center
        ax, ay = self.axes
        if ax <= 0 or ay <= 0:
            return False
        return ((x - cx) / ax) ** 2 + ((y - cy) / ay) ** 2 <= 1.0

    def path(self, dx=0.0, dy=0.0, shift=PATH_SHIFT):
        """
        Returns the oval outline as an int32 polygon for cv2.fillPoly,
        optionally translated by (dx, dy). Coordinates are fixed-point with
        `shift` fractional bits; pass the same `shift` to cv2.fillPoly.
        """
        scale = 1 << shift
        cx, cy = self.center
        ax, ay = self.axes
        return cv2.ellipse2Poly(
            (int(np.floor((cx + dx) * scale + 0.5)), int(np.floor((cy + dy) * scale + 0.5))),
            (max(int(ax * scale + 0.5), 0), max(int(ay * scale + 0.5), 0)),
            0,
            0,
            360,
            10,
        ).astype(np.int32)


class ParticleFactory:
    """Creates new particles."""

    @staticmethod
    def particle_with_rect(rect):
        """Creates a particle exactly inscribed in `rect`."""
        return Particle(rect)
