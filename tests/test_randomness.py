from twinkle.randomness import make_rng, random_element, uniform_int


def test_uniform_int_stays_in_range(rng):
    values = {uniform_int(rng, 5) for _ in range(500)}
    assert values == {0, 1, 2, 3, 4}


def test_uniform_int_degenerate_bounds(rng):
    assert uniform_int(rng, 0) == 0
    assert uniform_int(rng, -3) == 0
    assert uniform_int(rng, 0.9) == 0


def test_uniform_int_truncates_float_bounds(rng):
    assert all(uniform_int(rng, 2.7) in (0, 1) for _ in range(100))


def test_seeded_generators_repeat():
    a, b = make_rng(7), make_rng(7)
    assert [uniform_int(a, 100) for _ in range(20)] == [uniform_int(b, 100) for _ in range(20)]


def test_random_element(rng):
    palette = [(1, 2, 3), (4, 5, 6), (7, 8, 9)]
    assert random_element(rng, []) is None
    for _ in range(50):
        assert random_element(rng, palette) in palette
