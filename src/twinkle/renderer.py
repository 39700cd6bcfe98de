import cv2
import numpy as np

from twinkle.constants import BACKGROUND_COLOR
from twinkle.display_link import RenderLoop
from twinkle.layer import ShapeLayer
from twinkle.particle import PATH_SHIFT


class ParticleRenderer:
    """
    Handles the drawing logic using OpenCV.
    Each frame ticks the render loop, settles finished animations in the
    view's layer tree, then composites every shape layer back to front.
    """

    def __init__(self, view, fps, background=BACKGROUND_COLOR, run_loop=None):
        self.view = view
        self.w = int(view.width)
        self.h = int(view.height)
        self.fps = fps
        self.bg_color = background
        self.run_loop = run_loop or RenderLoop()
        self.frames_rendered = 0

    def live_layer_count(self):
        """Number of layers currently attached below the view's root layer."""
        return sum(1 for _ in self.view.layer.walk()) - 1

    def make_frame(self, t):
        """
        The callback function for MoviePy.
        Generates a single BGR video frame at time t.
        """
        # 1. Tick display links (spawns new particles)
        self.run_loop.fire(t)

        # 2. Settle finished animations (detaches expired particles)
        self.view.layer.advance(t)

        # 3. Setup Canvas
        frame = np.full((self.h, self.w, 3), self.bg_color, dtype=np.uint8)

        # 4. Draw layers, back to front
        for layer in self.view.layer.walk():
            if isinstance(layer, ShapeLayer) and layer.path is not None:
                self._draw_layer(frame, layer, t)

        self.frames_rendered += 1
        return frame

    def _draw_layer(self, frame, layer, t):
        state = layer.presentation(t)
        alpha = float(np.clip(state.opacity, 0.0, 1.0))
        if alpha <= 0.0:
            return

        points = layer.path.path(
            dx=layer.frame.x + state.translation_x,
            dy=layer.frame.y + state.translation_y,
        )

        # Blend only inside the clipped bounding box of the shape
        x0, y0 = (points.min(axis=0) >> PATH_SHIFT) - 1
        x1, y1 = (points.max(axis=0) >> PATH_SHIFT) + 2
        x0, y0 = max(int(x0), 0), max(int(y0), 0)
        x1, y1 = min(int(x1), self.w), min(int(y1), self.h)
        if x0 >= x1 or y0 >= y1:
            return

        roi = frame[y0:y1, x0:x1]
        overlay = roi.copy()
        origin = np.array([x0, y0], dtype=np.int32) << PATH_SHIFT
        cv2.fillPoly(overlay, [points - origin], layer.fill_color, cv2.LINE_AA, PATH_SHIFT)
        frame[y0:y1, x0:x1] = cv2.addWeighted(overlay, alpha, roi, 1.0 - alpha, 0)
