"""
Tests for AnimationGroup aggregation.
"""
import pytest

from spirited import (
    AggregationMethod, Animation, AnimationGroup, GroupError, TweenError, combine, compose, group,
)


@pytest.fixture
def one():
    return Animation(1, 100, easing="linear")


@pytest.fixture
def two():
    return Animation(2, 100, easing="linear")


def test_combine_sums(one, two):
    grp = AnimationGroup([one, two], "combine")

    assert grp.at_time(0) == [3]
    assert grp.cardinality == 1


def test_combine_widest_member_sets_cardinality(one, pair_animation):
    grp = combine(one, pair_animation)

    assert grp.cardinality == 2
    # The single-channel member only contributes to channel 0
    assert grp.at_time(0) == [2, 2]


def test_compose_slots(pair_animation, one):
    """Compose keeps one slot per member; single channels are unwrapped."""
    grp = compose(pair_animation, one)

    assert grp.cardinality == 2
    assert grp.at_time(0) == [[1, 2], 1]


def test_total_duration_is_longest(short_animation, long_animation):
    grp = group([short_animation, long_animation], AggregationMethod.COMBINE)

    assert grp.total_duration == 400


def test_finished_members_drop_out(once_animation, long_animation):
    """A finished non-looping member contributes nothing."""
    combined = combine(once_animation, long_animation)
    composed = compose(once_animation, long_animation)

    assert combined.at_time(300) == long_animation.at_time(300)
    assert composed.at_time(300) == [None, long_animation.at_time(300)[0]]


def test_all_members_finished():
    a = Animation(0, 100, easing="linear", loop=False)
    b = Animation(5, 50, easing="linear", loop=False)

    assert combine(a, b).at_time(100) is None
    assert compose(a, b).at_time(100) is None


def test_add_and_remove_resize(one, pair_animation):
    grp = combine(one)
    assert grp.cardinality == 1

    grp.add(pair_animation)
    assert grp.cardinality == 2
    assert pair_animation in grp
    assert len(grp) == 2

    grp.remove(pair_animation)
    assert grp.cardinality == 1
    assert grp.total_duration == 100


def test_remove_non_member_is_noop(one, two):
    grp = combine(one)

    grp.remove(two)

    assert grp.animations == (one,)


def test_insertion_order(one, two, pair_animation):
    grp = compose(two, pair_animation, one)

    assert list(grp) == [two, pair_animation, one]


def test_empty_group():
    grp = AnimationGroup([], "compose")

    assert grp.cardinality == 0
    assert grp.total_duration == 0
    assert grp.at_time(0) is None


def test_nested_groups(one, two, pair_animation):
    inner = combine(one, two)
    outer = compose(inner, pair_animation)

    assert outer.at_time(0) == [3, [1, 2]]


def test_duplicate_member_raises(one):
    with pytest.raises(GroupError):
        AnimationGroup([one, one], "combine")

    grp = combine(one)
    with pytest.raises(GroupError):
        grp.add(one)


def test_group_cannot_contain_itself(one):
    grp = combine(one)

    with pytest.raises(GroupError):
        grp.add(grp)


@pytest.mark.parametrize("method", ["merge", None, 3])
def test_bad_aggregation_method(one, method):
    with pytest.raises(GroupError):
        AnimationGroup([one], method)


def test_non_sequence_raises(one):
    with pytest.raises(GroupError):
        AnimationGroup(one, "combine")


def test_non_animation_member_raises():
    with pytest.raises(GroupError):
        AnimationGroup([object()], "combine")


def test_negative_elapsed_propagates(one):
    with pytest.raises(TweenError):
        combine(one).at_time(-10)
