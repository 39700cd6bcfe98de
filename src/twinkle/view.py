from twinkle.geometry import Rect
from twinkle.layer import Layer


class View:
    """The host surface particles are generated in: a frame plus a root layer."""

    def __init__(self, width, height):
        self.frame = Rect(0.0, 0.0, float(width), float(height))
        self.layer = Layer(self.frame)

    @property
    def width(self):
        return self.frame.width

    @property
    def height(self):
        return self.frame.height
