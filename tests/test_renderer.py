import numpy as np
import pytest

from twinkle.generator import ParticleGenerator
from twinkle.randomness import make_rng
from twinkle.renderer import ParticleRenderer
from twinkle.view import View

BACKGROUND = (20, 10, 10)


@pytest.fixture
def scene():
    view = View(160, 120)
    renderer = ParticleRenderer(view, 30, background=BACKGROUND)
    generator = ParticleGenerator(view, run_loop=renderer.run_loop, rng=make_rng(42))
    generator.minimum_radius = 4.0
    generator.max_radius = 8.0
    return view, renderer, generator


def test_empty_scene_is_background_only(scene):
    _, renderer, _ = scene

    frame = renderer.make_frame(0.0)

    assert frame.shape == (120, 160, 3)
    assert frame.dtype == np.uint8
    assert np.all(frame == np.array(BACKGROUND, dtype=np.uint8))
    assert renderer.frames_rendered == 1


def test_first_parcel_spawns_after_one_second(scene):
    _, renderer, generator = scene
    generator.start()

    renderer.make_frame(0.0)
    renderer.make_frame(0.5)
    assert renderer.live_layer_count() == 0

    renderer.make_frame(1.0)
    assert renderer.live_layer_count() == generator.parcel_size


def test_rising_particles_are_drawn(scene):
    _, renderer, generator = scene
    generator.start()

    renderer.make_frame(1.0)
    frame = renderer.make_frame(6.9)

    assert np.any(frame != np.array(BACKGROUND, dtype=np.uint8))


def test_expired_particles_are_removed(scene):
    _, renderer, generator = scene
    generator.start()

    renderer.make_frame(1.0)
    renderer.make_frame(40.0)

    # Only the parcel spawned at t=40 is still alive
    assert renderer.live_layer_count() == generator.parcel_size


def test_stopped_generator_spawns_nothing(scene):
    _, renderer, generator = scene
    generator.start()
    generator.stop()

    renderer.make_frame(5.0)

    assert renderer.live_layer_count() == 0
