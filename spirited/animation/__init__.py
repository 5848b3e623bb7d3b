"""Animation templates: easing, tweens, animations and animation groups."""

from .types import (
    AggregationMethod,
    AnimationOptions,
    DEFAULT_ANIMATION_OPTIONS,
    EasingCurve,
    TimelineSource,
    Tween,
)
from .easing import EASING_FUNCTIONS, create_easer, get_easing_function
from .animation import Animation
from .group import AnimationGroup

__all__ = [
    # Types
    'AggregationMethod',
    'AnimationOptions',
    'DEFAULT_ANIMATION_OPTIONS',
    'EasingCurve',
    'TimelineSource',
    'Tween',

    # Easing
    'EASING_FUNCTIONS',
    'create_easer',
    'get_easing_function',

    # Timelines
    'Animation',
    'AnimationGroup',
]
