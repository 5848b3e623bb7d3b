"""
Easing functions for animations.

Provides mathematical easing functions for smooth transitions.
All functions take t (progress) in range [0.0, 1.0]; most return a value in
range [0.0, 1.0], while back and elastic curves overshoot briefly.

Based on standard easing equations:
- Robert Penner's Easing Functions
- https://easings.net/
"""
import math
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from spirited.animation.types import EasingCurve
from spirited.errors import InvalidEasingError
from spirited.logging.logger import get_logger

logger = get_logger(__name__)

Easer = Callable[[float], float]


# Linear (no easing)
def linear(t: float) -> float:
    """Linear interpolation - no easing."""
    return t


# Sine easing
def sine_in(t: float) -> float:
    """Sine ease-in - accelerating using sine curve."""
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    """Sine ease-out - decelerating using sine curve."""
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    """Sine ease-in-out - accelerating until halfway, then decelerating."""
    return -(math.cos(math.pi * t) - 1) / 2


# Power curves share one shape, only the exponent changes
def _power_in(power: int) -> Easer:
    def ease_in(t: float) -> float:
        return t ** power
    return ease_in


def _power_out(power: int) -> Easer:
    def ease_out(t: float) -> float:
        return 1 - (1 - t) ** power
    return ease_out


def _power_in_out(power: int) -> Easer:
    def ease_in_out(t: float) -> float:
        if t < 0.5:
            return 2 ** (power - 1) * t ** power
        return 1 - (-2 * t + 2) ** power / 2
    return ease_in_out


quad_in, quad_out, quad_in_out = _power_in(2), _power_out(2), _power_in_out(2)
cubic_in, cubic_out, cubic_in_out = _power_in(3), _power_out(3), _power_in_out(3)
quart_in, quart_out, quart_in_out = _power_in(4), _power_out(4), _power_in_out(4)
quint_in, quint_out, quint_in_out = _power_in(5), _power_out(5), _power_in_out(5)


# Exponential easing
def expo_in(t: float) -> float:
    """Exponential ease-in - accelerating exponentially."""
    if t == 0:
        return 0.0
    return math.pow(2, 10 * (t - 1))


def expo_out(t: float) -> float:
    """Exponential ease-out - decelerating exponentially."""
    if t == 1:
        return 1.0
    return 1 - math.pow(2, -10 * t)


def expo_in_out(t: float) -> float:
    """Exponential ease-in-out - accelerating until halfway, then decelerating."""
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return math.pow(2, 20 * t - 10) / 2
    return (2 - math.pow(2, -20 * t + 10)) / 2


# Circular easing
def circ_in(t: float) -> float:
    """Circular ease-in - accelerating using circular curve."""
    return 1 - math.sqrt(1 - t * t)


def circ_out(t: float) -> float:
    """Circular ease-out - decelerating using circular curve."""
    t -= 1
    return math.sqrt(1 - t * t)


def circ_in_out(t: float) -> float:
    """Circular ease-in-out - accelerating until halfway, then decelerating."""
    if t < 0.5:
        return (1 - math.sqrt(1 - 4 * t * t)) / 2
    t = t * 2 - 2
    return (math.sqrt(1 - t * t) + 1) / 2


# Back easing
_BACK = 1.70158


def back_in(t: float) -> float:
    """Back ease-in - backing up slightly before accelerating."""
    return t * t * ((_BACK + 1) * t - _BACK)


def back_out(t: float) -> float:
    """Back ease-out - overshooting slightly before settling."""
    t -= 1
    return t * t * ((_BACK + 1) * t + _BACK) + 1


def back_in_out(t: float) -> float:
    """Back ease-in-out - backing up, then overshooting."""
    c = _BACK * 1.525
    if t < 0.5:
        return (2 * t) * (2 * t) * ((c + 1) * 2 * t - c) / 2
    t = t * 2 - 2
    return (t * t * ((c + 1) * t + c) + 2) / 2


# Elastic easing
def elastic_in(t: float) -> float:
    """Elastic ease-in - elastic motion, like a spring."""
    if t == 0 or t == 1:
        return float(t)
    return -math.pow(2, 10 * (t - 1)) * math.sin((t - 1.1) * 5 * math.pi)


def elastic_out(t: float) -> float:
    """Elastic ease-out - elastic motion, like a spring."""
    if t == 0 or t == 1:
        return float(t)
    return math.pow(2, -10 * t) * math.sin((t - 0.1) * 5 * math.pi) + 1


def elastic_in_out(t: float) -> float:
    """Elastic ease-in-out - elastic motion."""
    if t == 0 or t == 1:
        return float(t)
    t = t * 2 - 1
    if t < 0:
        return -0.5 * math.pow(2, 10 * t) * math.sin((t - 0.1) * 5 * math.pi)
    return 0.5 * math.pow(2, -10 * t) * math.sin((t - 0.1) * 5 * math.pi) + 1


# Bounce easing
def bounce_out(t: float) -> float:
    """Bounce ease-out - bouncing motion."""
    n1 = 7.5625
    d1 = 2.75

    if t < 1 / d1:
        return n1 * t * t
    elif t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    else:
        t -= 2.625 / d1
        return n1 * t * t + 0.984375


def bounce_in(t: float) -> float:
    """Bounce ease-in - bouncing motion."""
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    """Bounce ease-in-out - bouncing motion."""
    if t < 0.5:
        return (1 - bounce_out(1 - 2 * t)) / 2
    return (1 + bounce_out(2 * t - 1)) / 2


# Easing function lookup table, keyed by public name
EASING_FUNCTIONS: Mapping[str, Easer] = MappingProxyType({
    EasingCurve.LINEAR.value: linear,

    EasingCurve.SINE_IN.value: sine_in,
    EasingCurve.SINE_OUT.value: sine_out,
    EasingCurve.SINE_IN_OUT.value: sine_in_out,

    EasingCurve.QUAD_IN.value: quad_in,
    EasingCurve.QUAD_OUT.value: quad_out,
    EasingCurve.QUAD_IN_OUT.value: quad_in_out,

    EasingCurve.CUBIC_IN.value: cubic_in,
    EasingCurve.CUBIC_OUT.value: cubic_out,
    EasingCurve.CUBIC_IN_OUT.value: cubic_in_out,

    EasingCurve.QUART_IN.value: quart_in,
    EasingCurve.QUART_OUT.value: quart_out,
    EasingCurve.QUART_IN_OUT.value: quart_in_out,

    EasingCurve.QUINT_IN.value: quint_in,
    EasingCurve.QUINT_OUT.value: quint_out,
    EasingCurve.QUINT_IN_OUT.value: quint_in_out,

    EasingCurve.EXPO_IN.value: expo_in,
    EasingCurve.EXPO_OUT.value: expo_out,
    EasingCurve.EXPO_IN_OUT.value: expo_in_out,

    EasingCurve.CIRC_IN.value: circ_in,
    EasingCurve.CIRC_OUT.value: circ_out,
    EasingCurve.CIRC_IN_OUT.value: circ_in_out,

    EasingCurve.BACK_IN.value: back_in,
    EasingCurve.BACK_OUT.value: back_out,
    EasingCurve.BACK_IN_OUT.value: back_in_out,

    EasingCurve.ELASTIC_IN.value: elastic_in,
    EasingCurve.ELASTIC_OUT.value: elastic_out,
    EasingCurve.ELASTIC_IN_OUT.value: elastic_in_out,

    EasingCurve.BOUNCE_IN.value: bounce_in,
    EasingCurve.BOUNCE_OUT.value: bounce_out,
    EasingCurve.BOUNCE_IN_OUT.value: bounce_in_out,
})


def get_easing_function(name: Union[str, EasingCurve],
                        registry: Optional[Mapping[str, Easer]] = None) -> Easer:
    """
    Look up the raw easing function for a name.

    Args:
        name: Easing name (e.g. ``"easeInOutQuad"``) or EasingCurve member
        registry: Optional lookup table to use instead of EASING_FUNCTIONS

    Returns:
        Easing function that takes t in [0, 1]

    Raises:
        InvalidEasingError: If the name is not in the registry
    """
    table = EASING_FUNCTIONS if registry is None else registry
    key = name.value if isinstance(name, EasingCurve) else name

    try:
        easing_fn = table[key]
    except (KeyError, TypeError):
        raise InvalidEasingError(f"{name!r} is not a valid easing method") from None

    if not callable(easing_fn):
        raise InvalidEasingError(f"{name!r} is not a valid easing method")
    return easing_fn


def create_easer(name: Union[str, EasingCurve],
                 registry: Optional[Mapping[str, Easer]] = None) -> Easer:
    """
    Create a function that eases progress values using a named curve.

    Progress is clamped into [0, 1] before the curve is evaluated, so values
    that drift marginally past 1 at a loop seam are safe for every curve.

    Args:
        name: Easing name or EasingCurve member
        registry: Optional lookup table to use instead of EASING_FUNCTIONS

    Returns:
        Callable mapping progress to eased progress

    Raises:
        InvalidEasingError: If the name is not in the registry
    """
    easing_fn = get_easing_function(name, registry)

    def ease(progress: float) -> float:
        return easing_fn(max(0.0, min(1.0, progress)))

    logger.debug("[EASE] Easer created: %s", name)
    return ease
