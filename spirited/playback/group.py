"""
PlaybackGroup: several live playbacks ticked and stopped together.

Stopping a group is a barrier. Every member is asked to stop; members that
stop gracefully keep ticking until their own loop seam, and the group only
reports ``end`` once the last of them has finished.
"""
from functools import partial
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from spirited.animation.group import check_aggregation_method
from spirited.animation.types import AggregationMethod, PlaybackState
from spirited.errors import PlaybackGroupError
from spirited.events import EventEmitter, EventType
from spirited.logging.logger import get_logger, is_verbose_logging
from spirited.playback.playback import coerce_entities

logger = get_logger(__name__)

# Anything with this surface can be a member: Playback or PlaybackGroup
_MEMBER_ATTRIBUTES = ("start", "stop", "tick", "destroy", "once", "unsubscribe",
                      "started", "stopping", "cardinality")


class PlaybackGroup(EventEmitter):
    """
    Drives several playbacks as one.

    Events:
        ``tick``: ``(*result, time, *entities)`` when any member produced values
        ``end``: ``()`` once every member has finished after a stop
    """

    def __init__(self, playbacks: Sequence, aggregation_method: Union[str, AggregationMethod],
                 entities: Any = None):
        """
        Args:
            playbacks: List or tuple of Playbacks or PlaybackGroups
            aggregation_method: ``"combine"`` or ``"compose"``
            entities: Opaque caller context appended to every tick event

        Raises:
            PlaybackGroupError: On a non-sequence, a duplicate or invalid
                member, or an unknown aggregation method
        """
        if not isinstance(playbacks, (list, tuple)):
            raise PlaybackGroupError("The first parameter of a PlaybackGroup must be a list or tuple")

        super().__init__()

        self._aggregation_method = check_aggregation_method(
            aggregation_method, "PlaybackGroup", PlaybackGroupError)
        self._entities = coerce_entities(entities)

        self._playbacks: List = []
        self._cardinality = 0
        self._state = PlaybackState.IDLE
        self._destroyed = False
        self._last_time: Optional[float] = None
        # Members still finishing a graceful stop -> their end subscription id
        self._pending: Dict[Any, str] = {}

        for playback in playbacks:
            self._check_member(playback)
            self._playbacks.append(playback)

        self.resize()

    def _check_member(self, playback) -> None:
        if playback is self:
            raise PlaybackGroupError("A PlaybackGroup cannot contain itself")
        if not all(hasattr(playback, attr) for attr in _MEMBER_ATTRIBUTES):
            raise PlaybackGroupError(f"PlaybackGroup members must be playbacks, got {playback!r}")
        if any(member is playback for member in self._playbacks):
            raise PlaybackGroupError("The playback is already a member of this group")

    @property
    def aggregation_method(self) -> AggregationMethod:
        return self._aggregation_method

    @property
    def playbacks(self) -> Tuple:
        return tuple(self._playbacks)

    @property
    def entities(self) -> Tuple:
        return self._entities

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def started(self) -> bool:
        return self._state is not PlaybackState.IDLE

    @property
    def stopping(self) -> bool:
        return self._state is PlaybackState.STOPPING

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def cardinality(self) -> int:
        return self._cardinality

    @property
    def pending_count(self) -> int:
        """Number of members the group is still waiting on to stop."""
        return len(self._pending)

    def __len__(self) -> int:
        return len(self._playbacks)

    def __iter__(self) -> Iterator:
        return iter(tuple(self._playbacks))

    def __contains__(self, playback) -> bool:
        return any(member is playback for member in self._playbacks)

    def resize(self) -> None:
        """Recompute the cached cardinality."""
        if self._aggregation_method is AggregationMethod.COMBINE:
            self._cardinality = max((p.cardinality for p in self._playbacks), default=0)
        else:
            self._cardinality = len(self._playbacks)

    def start(self, time: float) -> 'PlaybackGroup':
        """
        Start every member that is not already running.

        Raises:
            PlaybackGroupError: If the group is already running or destroyed
        """
        if self._destroyed:
            raise PlaybackGroupError("PlaybackGroup has been destroyed and cannot be restarted")

        if self._state is not PlaybackState.IDLE:
            raise PlaybackGroupError("PlaybackGroup cannot be started as it's already running")

        for playback in list(self._playbacks):
            if not playback.started:
                playback.start(time)

        self._state = PlaybackState.STARTED
        self._last_time = time

        logger.debug(f"PlaybackGroup started at {time} (members={len(self._playbacks)})")
        return self

    def stop(self, ignore_graceful: bool = False) -> 'PlaybackGroup':
        """
        Stop every member; ``end`` fires when the last one has finished.

        Args:
            ignore_graceful: If True, members stop immediately
        """
        if self._state is PlaybackState.IDLE:
            return self

        if self._state is PlaybackState.STOPPING:
            if not ignore_graceful:
                return self

            # Each forced stop fires the member's end, which clears its entry
            for playback in list(self._pending):
                playback.stop(True)
            self._maybe_finish()
            return self

        self._state = PlaybackState.STOPPING

        for playback in list(self._playbacks):
            self._stop_member(playback, ignore_graceful)

        logger.debug(f"PlaybackGroup stopping (waiting on {len(self._pending)} members)")
        self._maybe_finish()
        return self

    def _stop_member(self, playback, ignore_graceful: bool = False) -> None:
        playback.stop(ignore_graceful)
        if playback.stopping and playback not in self._pending:
            self._pending[playback] = playback.once(
                EventType.END, partial(self._on_member_end, playback))

    def _on_member_end(self, playback) -> None:
        self._pending.pop(playback, None)
        self._maybe_finish()

    def _maybe_finish(self) -> None:
        if self._state is not PlaybackState.STOPPING:
            return

        # A member destroyed mid-stop drops our end listener along with its own
        for playback in [p for p in self._pending if not p.started]:
            playback.unsubscribe(self._pending.pop(playback))

        if not self._pending:
            self._finish("PlaybackGroup completed")

    def _finish(self, message: str) -> None:
        self._state = PlaybackState.IDLE
        logger.debug(message)
        self.publish(EventType.END)

    def add(self, playback, time: Optional[float] = None) -> 'PlaybackGroup':
        """
        Add a playback to the group.

        If the group is running, an idle member is started at ``time`` or,
        when omitted, at the last time the group was started or ticked. If
        the group is stopping, a running member is asked to stop and the
        group waits for it as well.

        Raises:
            PlaybackGroupError: If the playback is already a member
        """
        self._check_member(playback)

        if self._state is PlaybackState.STARTED and not playback.started:
            playback.start(time if time is not None else self._last_time)

        self._playbacks.append(playback)
        self.resize()

        if self._state is PlaybackState.STOPPING and playback.started:
            self._stop_member(playback)
        return self

    def remove(self, playback) -> 'PlaybackGroup':
        """Detach a playback from the group and stop it."""
        remaining = [member for member in self._playbacks if member is not playback]
        if len(remaining) != len(self._playbacks):
            self._playbacks = remaining
            self.resize()

        subscription_id = self._pending.pop(playback, None)
        if subscription_id is not None:
            playback.unsubscribe(subscription_id)

        playback.stop()
        # The removed member may have been the last one we were waiting on
        self._maybe_finish()
        return self

    def destroy(self) -> None:
        """Destroy every member and drop all listeners."""
        self.remove_all_listeners()
        for playback in list(self._playbacks):
            playback.destroy()
        self._pending.clear()
        self._state = PlaybackState.IDLE
        self._destroyed = True
        logger.debug("PlaybackGroup destroyed")

    def _combine(self, time: float) -> List:
        has_results = False
        results = [0] * self._cardinality

        for playback in list(self._playbacks):
            values = playback.tick(time)
            if not values:
                continue

            has_results = True
            # A member's timeline may have widened since the last resize()
            if len(values) > len(results):
                results.extend([0] * (len(values) - len(results)))
            for i, value in enumerate(values):
                results[i] += value

        return results if has_results else []

    def _compose(self, time: float) -> List:
        has_results = False
        results: List = []

        for playback in list(self._playbacks):
            values = playback.tick(time)
            if not values:
                results.append(None)
                continue

            has_results = True
            results.append(values[0] if len(values) == 1 else values)

        return results if has_results else []

    def tick(self, time: float) -> List:
        """
        Tick every member and aggregate their values.

        Returns:
            The aggregated values, or an empty list when idle or when no
            member produced output
        """
        if self._state is PlaybackState.IDLE:
            return []

        self._last_time = time

        if self._aggregation_method is AggregationMethod.COMBINE:
            result = self._combine(time)
        else:
            result = self._compose(time)

        if result:
            if is_verbose_logging():
                logger.debug(f"[TICK] PlaybackGroup t={time} result={result}")
            self.publish(EventType.TICK, *result, time, *self._entities)

        if self._state is PlaybackState.STOPPING:
            self._maybe_finish()
        elif (self._state is PlaybackState.STARTED and self._playbacks
                and not any(playback.started for playback in self._playbacks)):
            self._finish("PlaybackGroup completed (all members finished)")

        return result

    def __repr__(self) -> str:
        return (f"PlaybackGroup({self._aggregation_method.value}, state={self._state.value}, "
                f"members={len(self._playbacks)})")
