import sys

from twinkle.constants import (
    MAX_OPACITY,
    MIN_OPACITY,
    MIN_TWINKLE_DURATION,
    TWINKLE_DELAY_RANGE,
    TWINKLE_DURATION_RANGE,
)
from twinkle.randomness import uniform_int
from twinkle.timing import LINEAR

FOREVER = sys.float_info.max


class AnimationDelegate:
    """Receives a callback when an animation it is attached to stops."""

    def animation_did_stop(self, animation, finished):
        pass


class BasicAnimation:
    """
    Interpolates a single layer property (`key_path`) between two values.
    Times are media times in seconds; `begin_time` left as None is filled in
    by the layer when the animation is attached.
    """

    def __init__(
        self,
        key_path,
        from_value,
        to_value,
        duration,
        begin_time=None,
        autoreverses=False,
        repeat_count=1.0,
        timing_function=LINEAR,
        removed_on_completion=True,
        delegate=None,
    ):
        self.key_path = key_path
        self.from_value = from_value
        self.to_value = to_value
        self.duration = duration
        self.begin_time = begin_time
        self.autoreverses = autoreverses
        self.repeat_count = repeat_count
        self.timing_function = timing_function
        self.removed_on_completion = removed_on_completion
        self.delegate = delegate
        self.stopped = False

    def __repr__(self):
        return (
            f"BasicAnimation({self.key_path!r}, {self.from_value} -> {self.to_value}, "
            f"duration={self.duration}, begin_time={self.begin_time})"
        )

    @property
    def cycle_duration(self):
        """Length of one repetition, including the reversed half."""
        return self.duration * (2 if self.autoreverses else 1)

    @property
    def active_duration(self):
        # Astronomically large (or inf) for FOREVER
        return self.cycle_duration * max(self.repeat_count, 1.0)

    def has_started(self, t):
        return self.begin_time is not None and t >= self.begin_time

    def is_finished(self, t):
        if not self.has_started(t):
            return False
        return t - self.begin_time >= self.active_duration

    def value_at(self, t):
        """
        Returns the animated value at media time `t`,
        or None if the animation has not started yet.
        """
        if not self.has_started(t):
            return None

        if self.is_finished(t):
            progress = 0.0 if self.autoreverses else 1.0
        elif self.duration <= 0:
            progress = 1.0
        else:
            local = (t - self.begin_time) % self.cycle_duration
            if local >= self.duration:
                # Second half of an autoreversing cycle
                progress = 1.0 - (local - self.duration) / self.duration
            else:
                progress = local / self.duration

        eased = self.timing_function(progress)
        return self.from_value + (self.to_value - self.from_value) * eased


class ParticleAnimationFactory:
    """Puts together animations for a particle."""

    @staticmethod
    def particle_animation(rng, now):
        """Returns the animation chosen for a particle."""
        return ParticleAnimationFactory.opacity_animation(rng, now)

    @staticmethod
    def opacity_animation(rng, now, min_opacity=MIN_OPACITY, max_opacity=MAX_OPACITY):
        """
        Creates a repeating opacity fade in and out oscillating between
        `min_opacity` and `max_opacity`. This is the "twinkle" seen on the
        particles. It repeats until its layer is destroyed.
        """
        low, high = TWINKLE_DELAY_RANGE
        k = low + uniform_int(rng, high - low)
        duration = max(MIN_TWINKLE_DURATION, float(uniform_int(rng, TWINKLE_DURATION_RANGE) // 10))
        return BasicAnimation(
            "opacity",
            min_opacity,
            max_opacity,
            duration,
            begin_time=now + 1.0 / (k * 0.5),
            autoreverses=True,
            repeat_count=FOREVER,
            timing_function=LINEAR,
            removed_on_completion=True,
        )
