import numpy as np


def make_rng(seed=None):
    """Create the random source shared by the generator and animators."""
    return np.random.default_rng(seed)


def uniform_int(rng, upper):
    """
    Returns a uniform integer in [0, upper).
    Bounds below 1 collapse to 0 instead of raising.
    """
    upper = int(upper)
    if upper < 1:
        return 0
    return int(rng.integers(0, upper))


def random_element(rng, items):
    """Pick a random element from `items`, or None if it is empty."""
    if len(items) == 0:
        return None
    return items[uniform_int(rng, len(items))]
