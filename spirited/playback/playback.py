"""
Playback: a live time cursor over an Animation.

Think of a Playback as a concrete use of the more abstract Animation: the
animation at a particular point in (clock) time. Playbacks never read a
clock themselves; the caller supplies timestamps to start() and tick().

State machine:

    IDLE --start--> STARTED --stop (graceful, mid-loop)--> STOPPING
    STOPPING --tick crosses a loop seam--> IDLE
    STARTED/STOPPING --stop(ignore_graceful=True)--> IDLE
"""
import math
from typing import Any, List, Tuple

from spirited.animation.types import PlaybackOptions, PlaybackState, TimelineSource
from spirited.errors import PlaybackError
from spirited.events import EventEmitter, EventType
from spirited.logging.logger import get_logger, is_verbose_logging

logger = get_logger(__name__)


def coerce_entities(entities: Any) -> Tuple:
    """Normalize caller entities: None -> (), list/tuple -> tuple, else a 1-tuple."""
    if entities is None:
        return ()
    if isinstance(entities, (list, tuple)):
        return tuple(entities)
    return (entities,)


class Playback(EventEmitter):
    """
    Drives one Animation (or AnimationGroup) against absolute clock time.

    Events:
        ``tick``: ``(*values, time, *entities)`` for every tick with values
        ``end``: ``()`` exactly once per transition to idle

    Example:
        playback = Playback(animation, [sprite])
        playback.on_tick(lambda x, y, time, sprite: sprite.move(x, y))
        playback.start(now)
        playback.tick(now + 16)
    """

    def __init__(self, animation: TimelineSource, entities: Any = None,
                 graceful_stop: bool = True):
        """
        Args:
            animation: The timeline to play
            entities: Opaque caller context appended to every tick event; a
                list or tuple is spread, any other object is passed as one entity
            graceful_stop: If True, stop() waits for the next loop seam

        Raises:
            PlaybackError: If animation is not a timeline
        """
        if not isinstance(animation, TimelineSource):
            raise PlaybackError(f"Playback requires an animation or animation group, got {animation!r}")

        super().__init__()

        self._animation = animation
        self._entities = coerce_entities(entities)
        self._options = PlaybackOptions(graceful_stop=bool(graceful_stop))

        self._state = PlaybackState.IDLE
        self._started_at = 0.0
        # Multiples of total_duration passed through; > 0 means we've looped
        self._elapsed_durations = 0
        # Duration within the timeline at the last tick; 0 means at a loop seam
        self._current_duration = 0.0
        self._destroyed = False

    @property
    def animation(self) -> TimelineSource:
        return self._animation

    @property
    def entities(self) -> Tuple:
        return self._entities

    @property
    def options(self) -> PlaybackOptions:
        return self._options

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def started(self) -> bool:
        """True while the playback is running or stopping."""
        return self._state is not PlaybackState.IDLE

    @property
    def stopping(self) -> bool:
        """True while waiting for the next loop seam to stop."""
        return self._state is PlaybackState.STOPPING

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def started_at(self) -> float:
        return self._started_at

    @property
    def elapsed_durations(self) -> int:
        return self._elapsed_durations

    @property
    def cardinality(self) -> int:
        return self._animation.cardinality

    @property
    def total_duration(self) -> float:
        return self._animation.total_duration

    def start(self, time: float) -> 'Playback':
        """
        Begin playback.

        Args:
            time: Clock time that corresponds to elapsed time 0

        Raises:
            PlaybackError: If already started, or destroyed
        """
        if self._destroyed:
            raise PlaybackError("Playback has been destroyed and cannot be restarted")

        if self._state is not PlaybackState.IDLE:
            raise PlaybackError("Playback has already started")

        self._state = PlaybackState.STARTED
        self._started_at = time
        self._elapsed_durations = 0
        self._current_duration = 0.0

        logger.debug(f"Playback started at {time} (total_duration={self.total_duration})")
        return self

    def stop(self, ignore_graceful: bool = False) -> 'Playback':
        """
        End playback, either immediately or the next time it loops.

        With graceful stopping enabled (the default) a playback that is part
        way through its timeline moves to STOPPING and finishes on the tick
        that crosses the next loop seam, so it ends on its initial values.

        Args:
            ignore_graceful: If True, stop immediately
        """
        if self._state is PlaybackState.IDLE:
            return self

        if not ignore_graceful and self._options.graceful_stop:
            if self._state is PlaybackState.STOPPING:
                return self

            if self._current_duration > 0:
                self._state = PlaybackState.STOPPING
                logger.debug("Playback stopping at next loop seam")
                return self

        self._state = PlaybackState.IDLE
        self._current_duration = 0.0

        logger.debug("Playback completed")
        self.publish(EventType.END)
        return self

    def destroy(self) -> None:
        """
        Clean up immediately.

        Listeners are dropped first, so no ``end`` event is delivered. A
        destroyed playback cannot be started again.
        """
        self.remove_all_listeners()
        self.stop(True)
        self._destroyed = True
        logger.debug("Playback destroyed")

    def tick(self, time: float) -> List:
        """
        Advance the playback to a clock time.

        Fires ``tick`` or ``end`` listeners synchronously as needed.

        Args:
            time: Clock time to advance to

        Returns:
            The interpolated values, or an empty list when idle or when this
            tick completed the playback

        Raises:
            TweenError: If time is before the start time
        """
        if self._state is PlaybackState.IDLE:
            return []

        elapsed = time - self._started_at
        total_duration = self._animation.total_duration

        if total_duration > 0:
            elapsed_durations = math.floor(elapsed / total_duration)
        else:
            elapsed_durations = 0
        just_looped = elapsed_durations > self._elapsed_durations

        if self._state is PlaybackState.STOPPING and just_looped:
            # We passed through the loop seam since the last tick, so it's
            # safe to finish here: the animation is back at its first tween
            values = None
        else:
            values = self._animation.at_time(elapsed)

        self._elapsed_durations = elapsed_durations

        if values is None:
            # Either a non-looping animation just finished, or we were
            # stopping and just looped
            self.stop(True)
            return []

        self._current_duration = elapsed % total_duration if total_duration > 0 else 0.0

        if is_verbose_logging():
            logger.debug(f"[TICK] Playback t={time} elapsed={elapsed} values={values}")

        self.publish(EventType.TICK, *values, time, *self._entities)
        return values

    def __repr__(self) -> str:
        return f"Playback(state={self._state.value}, animation={self._animation!r})"
