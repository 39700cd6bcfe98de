import weakref
from collections import namedtuple

from twinkle.geometry import Rect

Presentation = namedtuple("Presentation", ["opacity", "translation_x", "translation_y"])

ANIMATABLE_KEY_PATHS = {
    "opacity": "opacity",
    "transform.translation.x": "translation_x",
    "transform.translation.y": "translation_y",
}


class Layer:
    """
    A node in the layer tree. Owns its sublayers; holds its superlayer weakly.
    Animations are keyed, and adding one under an existing key replaces it.
    """

    def __init__(self, frame=None):
        self.frame = frame or Rect(0.0, 0.0, 0.0, 0.0)
        self.opacity = 1.0
        self.sublayers = []
        self.animations = {}
        self.current_time = 0.0
        self._superlayer = None

    @property
    def superlayer(self):
        return self._superlayer() if self._superlayer is not None else None

    # --- Tree ---

    def insert_sublayer(self, layer, index):
        layer.remove_from_superlayer()
        index = max(0, min(index, len(self.sublayers)))
        self.sublayers.insert(index, layer)
        layer._superlayer = weakref.ref(self)
        layer.current_time = self.current_time

    def add_sublayer(self, layer):
        self.insert_sublayer(layer, len(self.sublayers))

    def remove_from_superlayer(self):
        """Detach from the parent. Does nothing if already detached."""
        parent = self.superlayer
        self._superlayer = None
        if parent is None:
            return
        try:
            parent.sublayers.remove(self)
        except ValueError:
            pass

    def walk(self):
        """Yields this layer and every descendant, back to front."""
        yield self
        for sublayer in list(self.sublayers):
            yield from sublayer.walk()

    # --- Animations ---

    def add_animation(self, animation, key):
        if animation.begin_time is None:
            animation.begin_time = self.current_time
        previous = self.animations.get(key)
        self.animations[key] = animation
        if previous is not None and previous is not animation:
            _stop(previous, False)

    def animation_for_key(self, key):
        return self.animations.get(key)

    def remove_animation_for_key(self, key):
        animation = self.animations.pop(key, None)
        if animation is not None:
            _stop(animation, False)

    def remove_all_animations(self):
        for key in list(self.animations):
            self.remove_animation_for_key(key)

    def advance(self, now):
        """
        Moves this subtree to media time `now`, settling finished animations.
        Delegates may detach layers while this runs.
        """
        for layer in list(self.walk()):
            layer.current_time = now
            for key, animation in list(layer.animations.items()):
                if animation.stopped or not animation.is_finished(now):
                    continue
                if animation.removed_on_completion:
                    layer.animations.pop(key, None)
                _stop(animation, True)

    def presentation(self, now=None):
        """Model values with all running animations applied at `now`."""
        now = self.current_time if now is None else now
        values = {"opacity": self.opacity, "translation_x": 0.0, "translation_y": 0.0}
        for animation in self.animations.values():
            field = ANIMATABLE_KEY_PATHS.get(animation.key_path)
            if field is None:
                continue
            value = animation.value_at(now)
            if value is not None:
                values[field] = value
        return Presentation(**values)


def _stop(animation, finished):
    if animation.stopped:
        return
    animation.stopped = True
    if animation.delegate is not None:
        animation.delegate.animation_did_stop(animation, finished)


class ShapeLayer(Layer):
    """A layer that draws a filled particle shape."""

    def __init__(self, frame=None, path=None, fill_color=None):
        super().__init__(frame)
        self.path = path
        self.fill_color = fill_color
        self.contents_gravity = "center"
