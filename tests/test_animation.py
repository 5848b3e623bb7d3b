"""Tests for Animation templates: tween chaining, lookup and interpolation."""
import math

import pytest

from spirited import Animation, InvalidEasingError, Tween, TweenError, animate


def test_initial_tween(pair_animation):
    """The initial tween starts at 0 and lasts default_duration."""
    first = pair_animation.tweens[0]

    assert isinstance(first, Tween)
    assert first.start == 0
    assert first.duration == 100
    assert first.end == 100


def test_tween_back_patches_deltas(pair_animation):
    """Adding a tween fills in the previous deltas and wraps back to the start."""
    first, second = pair_animation.tweens

    assert first.values == ((1, 1), (2, 2))
    assert second.start == 100
    assert second.values == ((2, -1), (4, -2))


def test_tweens_are_contiguous():
    anim = Animation(0, 100, easing="linear").tween(10, 50).tween(20).tween(30, 25)

    starts = [t.start for t in anim.tweens]
    ends = [t.end for t in anim.tweens]

    assert starts == [0, 100, 150, 250]
    assert ends[:-1] == starts[1:]
    assert anim.total_duration == 275


def test_single_tween_delta_unknown():
    """Until a second tween exists the delta is None."""
    anim = Animation([5, 6], 100, easing="linear")

    assert anim.last_tween.values == ((5, None), (6, None))
    assert anim.at_time(50) == [5, 6]


def test_at_time_concrete_values(pair_animation):
    assert pair_animation.at_time(0) == [1, 2]
    assert pair_animation.at_time(50) == pytest.approx([1.5, 3])
    assert pair_animation.at_time(100) == [2, 4]
    assert pair_animation.at_time(150) == pytest.approx([1.5, 3])


def test_looping_wraps(pair_animation):
    """Looping animations repeat every total_duration."""
    assert pair_animation.at_time(200) == [1, 2]
    assert pair_animation.at_time(250) == pytest.approx(pair_animation.at_time(50))
    assert pair_animation.at_time(1050) == pytest.approx(pair_animation.at_time(50))


def test_non_looping_finishes():
    """Past the end a non-looping animation has no value."""
    anim = Animation([1, 2], 100, easing="linear", round=False, loop=False).tween([2, 4], 100)

    assert anim.at_time(199) is not None
    assert anim.at_time(200) is None
    assert anim.at_time(5000) is None
    assert anim.elapsed_to_duration(200) is None


def test_seam_continuity(pair_animation):
    """Values approaching the loop seam approach the initial values."""
    near_end = pair_animation.at_time(199.999)

    assert near_end == pytest.approx([1, 2], abs=1e-3)


def test_interpolate_boundaries(pair_animation):
    """At a tween's start the value is exact; at its end it is value + delta."""
    first = pair_animation.tweens[0]

    assert pair_animation.interpolate(first, 0) == [1, 2]
    assert pair_animation.interpolate(first, 100) == pytest.approx([2, 4])


def test_tween_at_time_half_open(pair_animation):
    """Exactly at a boundary the later tween wins."""
    tween, duration = pair_animation.tween_at_time(100)

    assert tween is pair_animation.tweens[1]
    assert duration == 100


def test_elapsed_to_duration(pair_animation):
    assert pair_animation.elapsed_to_duration() == 0
    assert pair_animation.elapsed_to_duration(150) == 150
    assert pair_animation.elapsed_to_duration(450) == 50


def test_rounding_half_up():
    """Rounded animations return integers, halves rounded up."""
    anim = Animation([1, 2], 100, easing="linear").tween([2, 4], 100)

    assert anim.at_time(50) == [2, 3]
    assert all(isinstance(v, int) for v in anim.at_time(50))


def test_rounding_negative_half():
    anim = Animation(-2, 100, easing="linear").tween(-1)

    # -1.5 rounds towards +infinity
    assert anim.at_time(50) == [-1]


def test_easing_applied():
    anim = Animation(0, 100, easing="easeInQuad", round=False).tween(100)

    assert anim.at_time(50) == pytest.approx([25])


def test_scalar_and_sequence_inputs():
    """A bare number is one channel."""
    assert Animation(3, 10, easing="linear").cardinality == 1
    assert Animation((1, 2, 3), 10, easing="linear").cardinality == 3


@pytest.mark.parametrize("values", [[], "12", None, ["a"], [1, None], [True]])
def test_bad_initial_values(values):
    with pytest.raises(TweenError):
        Animation(values, 100, easing="linear")


@pytest.mark.parametrize("duration", [None, 0, -5, "100", math.inf, math.nan])
def test_bad_default_duration(duration):
    with pytest.raises(TweenError):
        Animation(1, duration, easing="linear")


def test_mismatched_cardinality(pair_animation):
    with pytest.raises(TweenError):
        pair_animation.tween([1, 2, 3])


def test_bad_tween_duration(pair_animation):
    with pytest.raises(TweenError):
        pair_animation.tween([1, 1], -1)


def test_failed_tween_leaves_animation_unchanged(pair_animation):
    before = pair_animation.tweens

    with pytest.raises(TweenError):
        pair_animation.tween([1, "x"])

    assert pair_animation.tweens == before


def test_missing_easing():
    with pytest.raises(InvalidEasingError):
        Animation(1, 100)


def test_negative_elapsed(pair_animation):
    with pytest.raises(TweenError):
        pair_animation.at_time(-1)


def test_animate_entry_point():
    anim = animate([0, 0], 500, easing="linear", loop=False)

    assert isinstance(anim, Animation)
    assert anim.options.loop is False
    assert anim.options.round is True


def test_last_tween_end_meets_first_tween_start():
    """The wrap delta brings the last tween exactly back to the initial values."""
    anim = Animation([0, 10], 100, easing="linear", round=False).tween([5, 20], 50).tween([30, -4])
    last = anim.last_tween

    assert anim.interpolate(last, last.end) == pytest.approx(anim.interpolate(anim.tweens[0], 0))
    assert anim.interpolate(last, last.end) == pytest.approx([0, 10])
