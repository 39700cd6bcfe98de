import sys

import pytest

from twinkle.animation import BasicAnimation, ParticleAnimationFactory
from twinkle.randomness import make_rng


def test_value_before_start_is_none():
    animation = BasicAnimation("opacity", 0.0, 1.0, 2.0, begin_time=5.0)
    assert animation.value_at(4.9) is None
    assert not animation.has_started(4.9)
    assert not animation.is_finished(4.9)


def test_linear_interpolation():
    animation = BasicAnimation("transform.translation.y", 100.0, 0.0, 4.0, begin_time=1.0)

    assert animation.value_at(1.0) == pytest.approx(100.0)
    assert animation.value_at(2.0) == pytest.approx(75.0)
    assert animation.value_at(3.0) == pytest.approx(50.0)
    assert not animation.is_finished(4.99)
    assert animation.is_finished(5.0)
    assert animation.value_at(6.0) == pytest.approx(0.0)


def test_autoreverse_comes_back():
    animation = BasicAnimation("opacity", 0.0, 1.0, 1.0, begin_time=0.0, autoreverses=True)

    assert animation.cycle_duration == 2.0
    assert animation.value_at(0.5) == pytest.approx(0.5)
    assert animation.value_at(1.5) == pytest.approx(0.5)
    assert animation.value_at(1.75) == pytest.approx(0.25)
    assert animation.is_finished(2.0)
    assert animation.value_at(2.0) == pytest.approx(0.0)


def test_repeat_count():
    animation = BasicAnimation("opacity", 0.0, 1.0, 1.0, begin_time=0.0, repeat_count=3)

    assert animation.active_duration == 3.0
    assert animation.value_at(2.25) == pytest.approx(0.25)
    assert not animation.is_finished(2.9)
    assert animation.is_finished(3.0)


@pytest.mark.parametrize("seed", range(25))
def test_twinkle_bounds(seed):
    now = 10.0
    animation = ParticleAnimationFactory.opacity_animation(make_rng(seed), now)

    assert animation.key_path == "opacity"
    assert animation.from_value == 0.15
    assert animation.to_value == 0.75
    assert animation.autoreverses
    assert animation.repeat_count == sys.float_info.max
    assert animation.duration in (0.3, 1.0, 2.0, 3.0, 4.0)
    assert 0.5 <= animation.begin_time - now <= 2.0


def test_twinkle_never_finishes_on_its_own(rng):
    animation = ParticleAnimationFactory.opacity_animation(rng, 0.0)

    assert not animation.is_finished(1e9)
    value = animation.value_at(1e6 + 0.123)
    assert 0.15 <= value <= 0.75


def test_twinkle_custom_bounds(rng):
    animation = ParticleAnimationFactory.opacity_animation(rng, 0.0, min_opacity=0.3, max_opacity=0.9)
    assert (animation.from_value, animation.to_value) == (0.3, 0.9)


def test_particle_animation_is_the_twinkle(rng):
    animation = ParticleAnimationFactory.particle_animation(rng, 3.0)
    assert animation.key_path == "opacity"
    assert animation.autoreverses
