import pytest

from twinkle.display_link import RenderLoop
from twinkle.generator import ParticleGenerator
from twinkle.randomness import make_rng
from twinkle.view import View


@pytest.fixture
def rng():
    return make_rng(1234)


@pytest.fixture
def view():
    return View(320, 240)


@pytest.fixture
def run_loop():
    return RenderLoop()


@pytest.fixture
def generator(view, run_loop, rng):
    return ParticleGenerator(view, run_loop=run_loop, rng=rng)
