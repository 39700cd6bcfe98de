import weakref

from twinkle.animation import AnimationDelegate, BasicAnimation, ParticleAnimationFactory
from twinkle.constants import (
    PARTICLE_ANIMATION_KEY,
    TRANSLATION_ANIMATION_KEY,
    TRANSLATION_DURATION_BASE,
    TRANSLATION_DURATION_RANGE,
    TRANSLATION_OFFSET_RANGE,
)
from twinkle.randomness import uniform_int
from twinkle.timing import LINEAR


class ParticleAnimator:
    """Creates animations for the particles themselves."""

    @staticmethod
    def animation_for_layer(layer, rng, now):
        animation = ParticleAnimationFactory.particle_animation(rng, now)
        layer.add_animation(animation, PARTICLE_ANIMATION_KEY)


class DetachOnStop(AnimationDelegate):
    """Removes a layer from its superlayer once its animation stops."""

    def __init__(self, layer):
        self._layer = weakref.ref(layer)

    def animation_did_stop(self, animation, finished):
        layer = self._layer()
        if layer is not None:
            layer.remove_from_superlayer()


class FrameAnimator:
    """Creates animations for particles in frame."""

    @staticmethod
    def animation_for_layer(layer, rect, rng, now, timing=LINEAR):
        """
        Creates a translation that moves the particle upwards along the y-axis
        of the parent view, from below the bottom of `rect` to just above its
        top, and applies it to `layer`. The layer is detached from the tree
        when the animation finishes. `timing` paces the climb (linear by default).
        """
        height = layer.frame.height
        offset = 1.0 + uniform_int(rng, TRANSLATION_OFFSET_RANGE) / 10.0
        duration = (uniform_int(rng, TRANSLATION_DURATION_RANGE) + TRANSLATION_DURATION_BASE) / 10.0

        animation = BasicAnimation(
            "transform.translation.y",
            rect.height + height * offset,
            -height,
            duration,
            begin_time=now,
            timing_function=timing,
            removed_on_completion=True,
            delegate=DetachOnStop(layer),
        )
        layer.add_animation(animation, TRANSLATION_ANIMATION_KEY)
        return animation
