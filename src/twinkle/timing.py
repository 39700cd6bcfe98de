"""
Media timing functions: cubic Bezier curves mapping animation progress (0-1)
to eased progress, with control points P0=(0,0) and P3=(1,1).
"""


class TimingFunction:
    """A cubic Bezier timing curve with control points (x1, y1) and (x2, y2)."""

    def __init__(self, x1, y1, x2, y2, name=None):
        self.control_points = (x1, y1, x2, y2)
        self.name = name

        # Polynomial coefficients
        self._cx = 3 * x1
        self._bx = 3 * (x2 - x1) - self._cx
        self._ax = 1 - self._cx - self._bx
        self._cy = 3 * y1
        self._by = 3 * (y2 - y1) - self._cy
        self._ay = 1 - self._cy - self._by

    def __repr__(self):
        return f"TimingFunction({self.name or self.control_points})"

    def __call__(self, t):
        """Evaluate the curve at progress `t`, clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        if self.control_points == (0.0, 0.0, 1.0, 1.0):
            return t
        return self._sample_y(self._solve_x(t))

    def _sample_x(self, s):
        return ((self._ax * s + self._bx) * s + self._cx) * s

    def _sample_y(self, s):
        return ((self._ay * s + self._by) * s + self._cy) * s

    def _sample_dx(self, s):
        return (3 * self._ax * s + 2 * self._bx) * s + self._cx

    def _solve_x(self, x, epsilon=1e-6):
        # Newton-Raphson first, bisection if the slope flattens out
        s = x
        for _ in range(8):
            error = self._sample_x(s) - x
            if abs(error) < epsilon:
                return s
            slope = self._sample_dx(s)
            if abs(slope) < epsilon:
                break
            s -= error / slope

        lo, hi = 0.0, 1.0
        s = x
        for _ in range(64):
            value = self._sample_x(s)
            if abs(value - x) < epsilon:
                break
            if value < x:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s


LINEAR = TimingFunction(0.0, 0.0, 1.0, 1.0, "linear")
EASE_IN = TimingFunction(0.42, 0.0, 1.0, 1.0, "ease_in")
EASE_OUT = TimingFunction(0.0, 0.0, 0.58, 1.0, "ease_out")
EASE_IN_EASE_OUT = TimingFunction(0.42, 0.0, 0.58, 1.0, "ease_in_ease_out")
DEFAULT = TimingFunction(0.25, 0.1, 0.25, 1.0, "default")

TIMING_FUNCTIONS = {
    f.name: f for f in (LINEAR, EASE_IN, EASE_OUT, EASE_IN_EASE_OUT, DEFAULT)
}


def timing_function(name):
    """Look up a named timing function."""
    if name not in TIMING_FUNCTIONS:
        available = ", ".join(sorted(TIMING_FUNCTIONS))
        raise ValueError(f"Unknown timing function '{name}'. Available: {available}")
    return TIMING_FUNCTIONS[name]
