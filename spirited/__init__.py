"""
spirited - value tweening for animations.

Build static Animation templates from tweens, aggregate them with
AnimationGroup, and drive them against your own clock with Playback and
PlaybackGroup:

    import spirited

    anim = spirited.animate([0, 0], 500, easing="easeInOutQuad").tween([100, 50])
    playback = anim.playback(sprite).on_tick(lambda x, y, time, sprite: sprite.move(x, y))
    playback.start(now)
    playback.tick(now + 16)
"""
from typing import Any, Union

from spirited.animation import (
    AggregationMethod,
    Animation,
    AnimationGroup,
    AnimationOptions,
    DEFAULT_ANIMATION_OPTIONS,
    EASING_FUNCTIONS,
    EasingCurve,
    TimelineSource,
    Tween,
    create_easer,
    get_easing_function,
)
from spirited.animation.types import DEFAULT_PLAYBACK_OPTIONS, PlaybackOptions, PlaybackState
from spirited.errors import (
    ConfigurationError,
    GroupError,
    InvalidEasingError,
    InvalidStateError,
    PlaybackError,
    PlaybackGroupError,
    SpiritedError,
    TweenError,
)
from spirited.events import EventEmitter, EventType
from spirited.logging import get_logger, setup_logging
from spirited.playback import Playback, PlaybackGroup

__version__ = "0.4.0"


def animate(initial_values, default_duration: float, **options) -> Animation:
    """Create an Animation; ``options`` are easing, round, loop and registry."""
    return Animation(initial_values, default_duration, **options)


def group(animations, aggregation_method: Union[str, AggregationMethod]) -> AnimationGroup:
    """Create an AnimationGroup."""
    return AnimationGroup(animations, aggregation_method)


def compose(*animations) -> AnimationGroup:
    """Group animations so each keeps its own slot in the output."""
    return AnimationGroup(list(animations), AggregationMethod.COMPOSE)


def combine(*animations) -> AnimationGroup:
    """Group animations so their values are summed channel-wise."""
    return AnimationGroup(list(animations), AggregationMethod.COMBINE)


def playback(animation: TimelineSource, *entities: Any, **options) -> Playback:
    """Create a Playback of an animation or group."""
    return Playback(animation, entities, **options)


def playback_group(playbacks, aggregation_method: Union[str, AggregationMethod],
                   *entities: Any) -> PlaybackGroup:
    """Create a PlaybackGroup over existing playbacks."""
    return PlaybackGroup(playbacks, aggregation_method, entities)


__all__ = [
    # Entry points
    'animate',
    'group',
    'compose',
    'combine',
    'playback',
    'playback_group',

    # Timelines
    'Animation',
    'AnimationGroup',
    'Tween',
    'TimelineSource',

    # Playback
    'Playback',
    'PlaybackGroup',
    'PlaybackState',

    # Easing
    'EasingCurve',
    'EASING_FUNCTIONS',
    'create_easer',
    'get_easing_function',

    # Options
    'AggregationMethod',
    'AnimationOptions',
    'PlaybackOptions',
    'DEFAULT_ANIMATION_OPTIONS',
    'DEFAULT_PLAYBACK_OPTIONS',

    # Events
    'EventEmitter',
    'EventType',

    # Errors
    'SpiritedError',
    'ConfigurationError',
    'InvalidStateError',
    'TweenError',
    'InvalidEasingError',
    'GroupError',
    'PlaybackError',
    'PlaybackGroupError',

    # Logging
    'get_logger',
    'setup_logging',
]
