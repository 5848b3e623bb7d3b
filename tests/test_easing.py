"""
Tests for easing curves and the easer factory.
"""
import pytest

from spirited import EASING_FUNCTIONS, EasingCurve, InvalidEasingError, create_easer, get_easing_function


@pytest.mark.parametrize("curve", list(EasingCurve))
def test_every_curve_hits_endpoints(curve):
    """Every curve maps 0 to 0 and 1 to 1."""
    ease = create_easer(curve.value)

    assert ease(0) == pytest.approx(0, abs=1e-9)
    assert ease(1) == pytest.approx(1, abs=1e-9)


def test_registry_matches_enum():
    """Each EasingCurve member has an entry in the lookup table."""
    assert set(EASING_FUNCTIONS) == {curve.value for curve in EasingCurve}
    assert len(EASING_FUNCTIONS) == 31


def test_quad_midpoints():
    """Quadratic curves at halfway."""
    assert create_easer("easeInQuad")(0.5) == pytest.approx(0.25)
    assert create_easer("easeOutQuad")(0.5) == pytest.approx(0.75)
    assert create_easer("easeInOutQuad")(0.5) == pytest.approx(0.5)


def test_linear_is_identity():
    ease = create_easer("linear")

    for t in (0.1, 0.33, 0.5, 0.9):
        assert ease(t) == pytest.approx(t)


def test_enum_member_accepted():
    """Passing the enum member is equivalent to its name."""
    assert create_easer(EasingCurve.CUBIC_IN)(0.5) == pytest.approx(0.125)


def test_progress_is_clamped():
    """Progress slightly past 1 (float drift at a seam) does not raise."""
    ease = create_easer("easeInCirc")

    assert ease(1.0000001) == pytest.approx(1)
    assert ease(-0.5) == pytest.approx(0)


def test_unknown_name_raises():
    with pytest.raises(InvalidEasingError):
        create_easer("easeSideways")


def test_missing_name_raises():
    """Easing is required; None is not a curve."""
    with pytest.raises(InvalidEasingError):
        create_easer(None)


def test_custom_registry():
    """A caller-supplied registry replaces the built-in curves."""
    registry = {"half": lambda t: t / 2}

    assert create_easer("half", registry)(1) == pytest.approx(0.5)

    with pytest.raises(InvalidEasingError):
        create_easer("linear", registry)


def test_non_callable_registry_entry_raises():
    with pytest.raises(InvalidEasingError):
        get_easing_function("broken", {"broken": 42})
