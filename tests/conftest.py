"""
Shared pytest fixtures for spirited tests.
"""
import pytest

from spirited import Animation


@pytest.fixture
def pair_animation():
    """[1, 2] -> [2, 4] over 100ms each, unrounded, linear, looping (total 200)."""
    return Animation([1, 2], 100, easing="linear", round=False).tween([2, 4], 100)


@pytest.fixture
def short_animation():
    """0 -> 100 over 100ms each way, linear, looping (total 200)."""
    return Animation(0, 100, easing="linear").tween(100)


@pytest.fixture
def long_animation():
    """0 -> 100 over 200ms each way, linear, looping (total 400)."""
    return Animation(0, 200, easing="linear").tween(100)


@pytest.fixture
def once_animation():
    """0 -> 100 over 100ms each way, linear, non-looping (total 200)."""
    return Animation(0, 100, easing="linear", loop=False).tween(100)


@pytest.fixture
def recorder():
    """Collects listener calls as argument tuples."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)

    return Recorder()
