import logging
import weakref

from twinkle.animators import FrameAnimator, ParticleAnimator
from twinkle.constants import (
    DEFAULT_COLOR,
    EXIT_TIMING,
    MAX_RADIUS,
    MINIMUM_RADIUS,
    PARCEL_SIZE,
    SPAWN_BAND,
    SPAWN_INTERVAL,
)
from twinkle.display_link import DisplayLink, RenderLoop
from twinkle.geometry import Rect
from twinkle.layer import ShapeLayer
from twinkle.particle import ParticleFactory
from twinkle.randomness import make_rng, random_element, uniform_int
from twinkle.timing import timing_function

logger = logging.getLogger(__name__)


class ParticleGenerator:
    """
    Coordinates with `ParticleFactory` to generate particles on a recurring
    basis. Every `SPAWN_INTERVAL` seconds of display link time a parcel of
    `parcel_size` particles is added to the bottom of the view's layer stack.

    The view is held weakly; once it is gone, ticks are skipped silently.
    """

    def __init__(self, view=None, run_loop=None, rng=None):
        # How many particles to generate per spawn
        self.parcel_size = PARCEL_SIZE
        # Desired colors of the particles (BGR tuples)
        self.colors = []
        self.minimum_radius = MINIMUM_RADIUS
        self.max_radius = MAX_RADIUS
        # Height of the band new particles are scattered over, 0 = top edge only
        self.spawn_band = SPAWN_BAND
        # Pacing of the upward drift
        self.exit_timing = timing_function(EXIT_TIMING)

        self.run_loop = run_loop or RenderLoop.current()
        self.rng = rng if rng is not None else make_rng()

        self._view = None
        self.view = view

        self.last_timestamp = 0.0
        self.display_link = None

    @property
    def view(self):
        return self._view() if self._view is not None else None

    @view.setter
    def view(self, view):
        self._view = weakref.ref(view) if view is not None else None

    @property
    def started(self):
        """Tells whether the generator is running or not."""
        return self.display_link is not None

    def start(self, display_link=None):
        """
        Starts generating particles. An injected `display_link` is used in
        place of a fresh one unless it has been invalidated. Starting while
        running replaces the current registration.
        """
        if self.started and display_link is self.display_link:
            return
        if self.started:
            logger.debug("Generator already running, replacing its display link")
            self.stop()

        if display_link is None or not display_link.is_valid:
            display_link = DisplayLink(self.update)
        elif display_link.target is None:
            display_link.target = self.update

        self.display_link = display_link
        self.display_link.add_to(self.run_loop)
        logger.debug("Particle generator started")

    def stop(self):
        """Stops the generator from generating more particles."""
        if self.display_link is None:
            return
        self.display_link.remove_from(self.run_loop)
        self.display_link.invalidate()
        self.display_link = None
        logger.debug("Particle generator stopped")

    def pick_color(self):
        """A random color from the palette, or the default if it is empty."""
        color = random_element(self.rng, self.colors)
        return DEFAULT_COLOR if color is None else color

    def make_parcel(self):
        """Generates a parcel of particles according to the options."""
        view = self.view
        width = view.frame.width if view is not None else 0.0

        parcel = []
        for _ in range(max(self.parcel_size, 0)):
            x = float(uniform_int(self.rng, width))
            y = float(uniform_int(self.rng, self.spawn_band))
            size = float(uniform_int(self.rng, self.max_radius)) + self.minimum_radius
            parcel.append(ParticleFactory.particle_with_rect(Rect(x, y, size, size)))
        return parcel

    def update(self, display_link):
        """Per-frame tick. Spawns at most one parcel per spawn interval."""
        if display_link.timestamp - self.last_timestamp < SPAWN_INTERVAL:
            return
        view = self.view
        if view is None:
            return

        self.last_timestamp = display_link.timestamp
        now = display_link.timestamp

        layers = []
        for particle in self.make_parcel():
            layer = ShapeLayer(
                frame=Rect(0.0, 0.0, self.max_radius, self.max_radius),
                path=particle,
                fill_color=self.pick_color(),
            )
            layers.append(layer)

        for layer in layers:
            ParticleAnimator.animation_for_layer(layer, self.rng, now)
            FrameAnimator.animation_for_layer(layer, view.frame, self.rng, now, self.exit_timing)
            view.layer.insert_sublayer(layer, 0)

        logger.debug(f"Spawned {len(layers)} particles at t={now:.2f}s")
