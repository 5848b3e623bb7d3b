"""
Animation: an ordered, static template of tweens.

An Animation describes each tween, its values and its duration. Durations
are measured from time 0, when the first tween starts: a tween that starts
at 200 starts 200ms after the animation begins. One Animation can back any
number of Playbacks at once; it holds no running time state of its own.
"""
import math
from dataclasses import replace
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from spirited.animation.easing import Easer, create_easer
from spirited.animation.types import (
    AnimationOptions, EasingCurve, Tween, is_number, is_number_sequence,
)
from spirited.errors import TweenError
from spirited.logging.logger import get_logger

logger = get_logger(__name__)

Values = Union[float, Iterable[float]]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def _coerce_values(values: Values, message: str) -> List[float]:
    if is_number(values):
        return [values]
    if isinstance(values, (str, bytes)):
        raise TweenError(message)
    try:
        values = list(values)
    except TypeError:
        raise TweenError(message) from None
    if not values or not is_number_sequence(values):
        raise TweenError(message)
    return values


def _check_duration(duration, what: str) -> None:
    if duration is None:
        raise TweenError(f"You must provide a {what} to the animation")
    if not is_number(duration) or not duration > 0 or math.isinf(duration):
        raise TweenError(f"The {what} must be a positive, finite number, got {duration!r}")


class Animation:
    """
    A sequence of tweens sharing one channel cardinality.

    Example:
        anim = Animation([1, 2], 100, easing="linear", round=False).tween([2, 4], 100)
        anim.at_time(50)   # [1.5, 3.0]
    """

    def __init__(self, initial_values: Values, default_duration: float,
                 easing: Union[str, EasingCurve, None] = None,
                 round: bool = True, loop: bool = True,
                 registry: Optional[Mapping] = None):
        """
        Create an animation with a single initial tween.

        Args:
            initial_values: A number, or a non-empty sequence of numbers
            default_duration: Duration (ms) of the initial tween and of any
                later tween added without an explicit duration
            easing: Easing name, see ``spirited.animation.easing``
            round: Round interpolated values to the nearest integer
            loop: Wrap at the end of the timeline instead of finishing
            registry: Optional easing lookup table replacing the built-in one

        Raises:
            TweenError: If the values or duration are invalid
            InvalidEasingError: If the easing name is unknown
        """
        values = _coerce_values(
            initial_values, "You must provide initial_values as a number or a sequence of numbers")
        _check_duration(default_duration, "default duration")

        self._default_duration = default_duration
        self._options = AnimationOptions(round=bool(round), loop=bool(loop))
        self._ease: Easer = create_easer(easing, registry)
        self._maybe_round = round_half_up if self._options.round else None

        # Deltas are unknown until a second tween is added
        self._tweens: List[Tween] = [
            Tween(0, default_duration, tuple((value, None) for value in values))
        ]

        logger.debug(f"Animation created (channels={len(values)}, duration={default_duration}, "
                     f"easing={easing}, round={self._options.round}, loop={self._options.loop})")

    @property
    def default_duration(self) -> float:
        return self._default_duration

    @property
    def options(self) -> AnimationOptions:
        return self._options

    @property
    def ease(self) -> Easer:
        return self._ease

    @property
    def tweens(self) -> Tuple[Tween, ...]:
        return tuple(self._tweens)

    @property
    def last_tween(self) -> Tween:
        return self._tweens[-1]

    @property
    def total_duration(self) -> float:
        """The duration, in ms, of the whole animation."""
        return self._tweens[-1].end

    @property
    def cardinality(self) -> int:
        """Number of channels in every tween."""
        return self._tweens[0].cardinality

    def tween(self, target_values: Values, duration: Optional[float] = None) -> 'Animation':
        """
        Add a tween to the animation.

        The previous last tween's deltas are patched to reach ``target_values``,
        and the new tween gets deltas that lead back to the first tween, so a
        looping animation wraps smoothly.

        Args:
            target_values: Values for the new tween (same cardinality)
            duration: Duration of the new tween, defaults to default_duration

        Returns:
            self, for chaining

        Raises:
            TweenError: On bad values, mismatched cardinality or bad duration
        """
        targets = _coerce_values(target_values, "Can only animate numbers or sequences of numbers")

        if len(targets) != self.cardinality:
            raise TweenError("All tweens must have the same number of targets: "
                             f"expected {self.cardinality}, got {len(targets)}")

        if duration is None:
            duration = self._default_duration
        _check_duration(duration, "tween duration")

        previous = self._tweens[-1]

        self._tweens[-1] = replace(previous, values=tuple(
            (value, target - value)
            for (value, _), target in zip(previous.values, targets)
        ))
        # The patched tween may be the first one; read initial values after patching
        first = self._tweens[0]

        self._tweens.append(Tween(previous.end, duration, tuple(
            (target, initial - target)
            for target, (initial, _) in zip(targets, first.values)
        )))
        return self

    def elapsed_to_duration(self, elapsed_time: float = 0) -> Optional[float]:
        """
        Convert an elapsed time to a duration within the timeline.

        Args:
            elapsed_time: Time relative to the animation start

        Returns:
            Duration in [0, total_duration), or None if the elapsed time is
            past the end of a non-looping animation

        Raises:
            TweenError: If elapsed_time is negative
        """
        if elapsed_time < 0:
            raise TweenError(f"Cannot find a tween before the animation starts: {elapsed_time} < 0")

        total_duration = self.total_duration
        duration = elapsed_time

        if duration >= total_duration:
            if not self._options.loop:
                # Past the end; not an error, but there is no duration to return
                return None
            duration %= total_duration

        return duration

    def tween_at_time(self, elapsed_time: float) -> Optional[Tuple[Tween, float]]:
        """
        Find the tween active at an elapsed time.

        Returns:
            ``(tween, duration)`` or None when the animation has finished
        """
        duration = self.elapsed_to_duration(elapsed_time)
        if duration is None:
            return None

        for tween in self._tweens:
            if tween.contains(duration):
                return tween, duration

        return None

    def interpolate(self, tween: Tween, time: float) -> List[float]:
        """
        Interpolate a tween's values to a time.

        Args:
            tween: The tween to interpolate
            time: Duration within the timeline, expected within
                ``[tween.start, tween.end]``

        Returns:
            The interpolated channel values
        """
        eased = self._ease((time - tween.start) / tween.duration)
        results = [value + (delta or 0) * eased for value, delta in tween.values]

        if self._maybe_round is not None:
            return [self._maybe_round(value) for value in results]
        return results

    def at_time(self, elapsed_time: float) -> Optional[List[float]]:
        """
        Get the animation's values at an elapsed time.

        An elapsed time is relative to the animation: 0 is the start of the
        first tween. Converting clock time to elapsed time is the caller's
        job, see Playback.tick.

        Returns:
            The interpolated values, or None once a non-looping animation
            has finished
        """
        found = self.tween_at_time(elapsed_time)
        if found is None:
            return None

        tween, duration = found
        return self.interpolate(tween, duration)

    def playback(self, *entities, **options):
        """Create a Playback of this animation; see Playback for options."""
        from spirited.playback.playback import Playback
        return Playback(self, entities, **options)

    def __repr__(self) -> str:
        return (f"Animation(channels={self.cardinality}, tweens={len(self._tweens)}, "
                f"total_duration={self.total_duration})")
