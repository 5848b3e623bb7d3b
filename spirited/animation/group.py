"""
AnimationGroup: several timelines aggregated into one.

A group is itself a TimelineSource, so a Playback can drive it exactly like
a single Animation, and groups can contain other groups.
"""
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from spirited.animation.types import AggregationMethod, TimelineSource, resolve_aggregation_method
from spirited.errors import GroupError
from spirited.logging.logger import get_logger

logger = get_logger(__name__)


def check_aggregation_method(method, owner: str, error_cls=GroupError) -> AggregationMethod:
    try:
        return resolve_aggregation_method(method)
    except (ValueError, TypeError):
        valid = ", ".join(m.value for m in AggregationMethod)
        raise error_cls(f"Invalid aggregation_method for {owner}. "
                        f"Got {method!r}. Expected one of: {valid}") from None


class AnimationGroup:
    """
    Aggregates several Animations into one virtual Animation.

    ``combine`` sums member values channel-wise; ``compose`` keeps one
    positional slot per member. Cardinality and total duration are cached
    and recomputed whenever membership changes.
    """

    def __init__(self, animations: Sequence[TimelineSource],
                 aggregation_method: Union[str, AggregationMethod]):
        """
        Args:
            animations: List or tuple of animations (may be empty)
            aggregation_method: ``"combine"`` or ``"compose"``

        Raises:
            GroupError: On a non-sequence, a duplicate member, a member that
                is not a timeline, or an unknown aggregation method
        """
        if not isinstance(animations, (list, tuple)):
            raise GroupError("The first parameter of an AnimationGroup must be a list or tuple")

        self._aggregation_method = check_aggregation_method(aggregation_method, "AnimationGroup")

        # dict keeps insertion order; used as an ordered set
        self._animations: Dict[TimelineSource, None] = {}
        self._cardinality = 0
        self._total_duration = 0

        for animation in animations:
            self._check_member(animation)
            self._animations[animation] = None

        self.resize()

    def _check_member(self, animation) -> None:
        if animation is self:
            raise GroupError("An AnimationGroup cannot contain itself")
        if not isinstance(animation, TimelineSource):
            raise GroupError(f"AnimationGroup members must be animations, got {animation!r}")
        if animation in self._animations:
            raise GroupError("The animation is already a member of this group")

    @property
    def aggregation_method(self) -> AggregationMethod:
        return self._aggregation_method

    @property
    def animations(self) -> Tuple[TimelineSource, ...]:
        return tuple(self._animations)

    @property
    def cardinality(self) -> int:
        return self._cardinality

    @property
    def total_duration(self) -> float:
        return self._total_duration

    def __len__(self) -> int:
        return len(self._animations)

    def __iter__(self) -> Iterator[TimelineSource]:
        return iter(tuple(self._animations))

    def __contains__(self, animation) -> bool:
        return animation in self._animations

    def add(self, animation: TimelineSource) -> 'AnimationGroup':
        """
        Add an animation to the group.

        Raises:
            GroupError: If the animation is already a member
        """
        self._check_member(animation)
        self._animations[animation] = None
        self.resize()
        return self

    def remove(self, animation: TimelineSource) -> 'AnimationGroup':
        """Remove an animation from the group; removing a non-member does nothing."""
        if animation in self._animations:
            del self._animations[animation]
            self.resize()
        return self

    def resize(self) -> None:
        """Recompute the cached cardinality and total duration."""
        members = self._animations

        if self._aggregation_method is AggregationMethod.COMBINE:
            self._cardinality = max((a.cardinality for a in members), default=0)
        else:
            self._cardinality = len(members)

        self._total_duration = max((a.total_duration for a in members), default=0)

        logger.debug(f"AnimationGroup resized (members={len(members)}, "
                     f"cardinality={self._cardinality}, total_duration={self._total_duration})")

    def combine(self, elapsed_time: float) -> Optional[List[float]]:
        """
        Sum the values of every member channel-wise.

        Members that have finished contribute nothing.

        Returns:
            A list sized to the group cardinality, or None if no member
            produced a value
        """
        has_results = False
        results = [0] * self._cardinality

        for animation in self._animations:
            values = animation.at_time(elapsed_time)
            if values is None:
                continue

            has_results = True
            for i, value in enumerate(values):
                results[i] += value

        return results if has_results else None

    def compose(self, elapsed_time: float) -> Optional[List]:
        """
        Collect each member's values into its own slot.

        Single-channel results are unwrapped to a bare number; finished
        members leave None in their slot.

        Returns:
            A list with one slot per member, or None if no member produced
            a value
        """
        has_results = False
        results: List = []

        for animation in self._animations:
            values = animation.at_time(elapsed_time)
            if values is None:
                results.append(None)
                continue

            has_results = True
            results.append(values[0] if len(values) == 1 else values)

        return results if has_results else None

    def at_time(self, elapsed_time: float) -> Optional[List]:
        """Aggregate member values at an elapsed time."""
        if self._aggregation_method is AggregationMethod.COMBINE:
            return self.combine(elapsed_time)
        return self.compose(elapsed_time)

    def playback(self, *entities, **options):
        """Create a Playback of this group; see Playback for options."""
        from spirited.playback.playback import Playback
        return Playback(self, entities, **options)

    def __repr__(self) -> str:
        return (f"AnimationGroup({self._aggregation_method.value}, members={len(self._animations)}, "
                f"cardinality={self._cardinality}, total_duration={self._total_duration})")
