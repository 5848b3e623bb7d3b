"""
Animation types, enums, and dataclasses.

Defines the core value types shared by animations, groups and playbacks.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable


class EasingCurve(Enum):
    """
    Easing curve names.

    Easing functions control the rate of change of the animated value over time.
    The enum values are the public names accepted by ``create_easer``.
    """
    # Basic
    LINEAR = "linear"

    # Sine
    SINE_IN = "easeInSine"
    SINE_OUT = "easeOutSine"
    SINE_IN_OUT = "easeInOutSine"

    # Quadratic
    QUAD_IN = "easeInQuad"
    QUAD_OUT = "easeOutQuad"
    QUAD_IN_OUT = "easeInOutQuad"

    # Cubic
    CUBIC_IN = "easeInCubic"
    CUBIC_OUT = "easeOutCubic"
    CUBIC_IN_OUT = "easeInOutCubic"

    # Quartic
    QUART_IN = "easeInQuart"
    QUART_OUT = "easeOutQuart"
    QUART_IN_OUT = "easeInOutQuart"

    # Quintic
    QUINT_IN = "easeInQuint"
    QUINT_OUT = "easeOutQuint"
    QUINT_IN_OUT = "easeInOutQuint"

    # Exponential
    EXPO_IN = "easeInExpo"
    EXPO_OUT = "easeOutExpo"
    EXPO_IN_OUT = "easeInOutExpo"

    # Circular
    CIRC_IN = "easeInCirc"
    CIRC_OUT = "easeOutCirc"
    CIRC_IN_OUT = "easeInOutCirc"

    # Back
    BACK_IN = "easeInBack"
    BACK_OUT = "easeOutBack"
    BACK_IN_OUT = "easeInOutBack"

    # Elastic
    ELASTIC_IN = "easeInElastic"
    ELASTIC_OUT = "easeOutElastic"
    ELASTIC_IN_OUT = "easeInOutElastic"

    # Bounce
    BOUNCE_IN = "easeInBounce"
    BOUNCE_OUT = "easeOutBounce"
    BOUNCE_IN_OUT = "easeInOutBounce"


class AggregationMethod(Enum):
    """How a group merges the results of its members."""
    COMBINE = "combine"    # Sum channel-wise
    COMPOSE = "compose"    # One positional slot per member


class PlaybackState(Enum):
    """Lifecycle state of a Playback or PlaybackGroup."""
    IDLE = "idle"
    STARTED = "started"
    STOPPING = "stopping"


@dataclass(frozen=True)
class AnimationOptions:
    """Options for an Animation."""
    round: bool = True    # Round interpolated values to the nearest integer
    loop: bool = True     # Wrap at the end of the timeline instead of finishing


@dataclass(frozen=True)
class PlaybackOptions:
    """Options for a Playback."""
    graceful_stop: bool = True    # Defer stop() until the next loop seam


DEFAULT_ANIMATION_OPTIONS = AnimationOptions()
DEFAULT_PLAYBACK_OPTIONS = PlaybackOptions()


# (value, delta to the next tween's value); delta is None until a tween follows
TweenValue = Tuple[float, Optional[float]]


@dataclass(frozen=True)
class Tween:
    """
    One interpolation segment of an Animation.

    ``start`` is the offset (ms) from animation time 0; ``values`` holds one
    ``(value, delta)`` pair per channel.
    """
    start: float
    duration: float
    values: Tuple[TweenValue, ...]

    @property
    def end(self) -> float:
        return self.start + self.duration

    @property
    def cardinality(self) -> int:
        return len(self.values)

    def contains(self, time: float) -> bool:
        """Half-open match: ``start <= time < end``."""
        return self.start <= time < self.end


@runtime_checkable
class TimelineSource(Protocol):
    """Anything a Playback can drive: an Animation or an AnimationGroup."""

    @property
    def cardinality(self) -> int:
        ...

    @property
    def total_duration(self) -> float:
        ...

    def at_time(self, elapsed_time: float) -> Optional[List]:
        """Values at ``elapsed_time``, or None once the timeline has finished."""
        ...


def resolve_aggregation_method(method) -> AggregationMethod:
    """Coerce a string or enum into an AggregationMethod, or raise ValueError."""
    if isinstance(method, AggregationMethod):
        return method
    return AggregationMethod(method)


def is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_number_sequence(values: Sequence) -> bool:
    if isinstance(values, (str, bytes)):
        return False
    try:
        return all(is_number(v) for v in values)
    except TypeError:
        return False
