"""
Exception hierarchy for spirited.

Every error is raised synchronously by the call that broke a contract.
Reaching the end of a non-looping timeline is not an error; it is reported
as ``None`` (or an empty tick result) instead.
"""


class SpiritedError(Exception):
    """Base class for all spirited errors."""


class ConfigurationError(SpiritedError):
    """Invalid arguments given to a constructor or mutator."""


class InvalidStateError(SpiritedError):
    """Operation not allowed in the object's current lifecycle state."""


class TweenError(ConfigurationError):
    """Bad tween values, durations or elapsed times."""


class InvalidEasingError(ConfigurationError):
    """Easing name does not resolve to a known function."""


class GroupError(ConfigurationError):
    """Bad group construction or membership change."""


class PlaybackError(InvalidStateError):
    """Playback started twice, started after destroy, or given a bad timeline."""


class PlaybackGroupError(GroupError, InvalidStateError):
    """PlaybackGroup misuse: bad members, bad aggregation or double start."""
