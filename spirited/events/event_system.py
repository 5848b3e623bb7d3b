"""
Event emitter used by playbacks.

Provides a synchronous publish-subscribe pattern: listeners run in priority
order on the caller's stack, inside the publish() call that triggered them.
Exceptions raised by listeners propagate to the publisher.
"""
from collections import defaultdict
from typing import Callable, Dict, List

from spirited.events.event_types import EventType, Subscription
from spirited.logging.logger import get_logger

logger = get_logger(__name__)


class EventEmitter:
    """
    Base class for objects that publish events.

    Not thread-safe; all subscriptions are per instance.
    """

    def __init__(self):
        """Initialize the emitter with no subscriptions."""
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)
        self._subscription_map: Dict[str, Subscription] = {}

    def subscribe(
        self,
        event_type: str,
        callback: Callable[..., None],
        priority: int = 50,
        once: bool = False,
    ) -> str:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of event to subscribe to
            callback: Function to call with the published arguments
            priority: Priority (higher = called earlier), default 50
            once: Remove the subscription after its first call

        Returns:
            str: Subscription ID for unsubscribing

        Raises:
            ValueError: If callback is not callable
        """
        if not callable(callback):
            raise ValueError("Callback must be callable")

        if not isinstance(event_type, str) or not event_type.strip():
            raise ValueError("event_type must be a non-empty string")

        subscription = Subscription(callback, event_type, priority, once)
        self._subscriptions[event_type].append(subscription)
        self._subscription_map[subscription.id] = subscription

        # Sort by priority (higher first); sort is stable so ties keep insertion order
        self._subscriptions[event_type].sort()

        logger.debug(f"New subscription: {subscription.id} for {event_type} (priority={priority})")
        return subscription.id

    def on(self, event_type: str, callback: Callable[..., None], priority: int = 50) -> str:
        """Subscribe to every occurrence of ``event_type``."""
        return self.subscribe(event_type, callback, priority)

    def once(self, event_type: str, callback: Callable[..., None], priority: int = 50) -> str:
        """Subscribe to the next occurrence of ``event_type`` only."""
        return self.subscribe(event_type, callback, priority, once=True)

    def on_tick(self, callback: Callable[..., None]) -> 'EventEmitter':
        """Register a tick listener; returns self for chaining."""
        self.subscribe(EventType.TICK, callback)
        return self

    def on_complete(self, callback: Callable[[], None]) -> 'EventEmitter':
        """Register a completion listener; returns self for chaining."""
        self.subscribe(EventType.END, callback)
        return self

    def unsubscribe(self, subscription_id: str) -> None:
        """
        Unsubscribe from events.

        Args:
            subscription_id: ID returned from subscribe()
        """
        subscription = self._subscription_map.pop(subscription_id, None)
        if subscription is None:
            logger.debug(f"Unsubscribe called with unknown id: {subscription_id}")
            return

        subscription.active = False

        event_type = subscription.event_type
        if event_type in self._subscriptions:
            self._subscriptions[event_type] = [
                s for s in self._subscriptions[event_type]
                if s.id != subscription_id
            ]

            if not self._subscriptions[event_type]:
                self._subscriptions.pop(event_type, None)

        logger.debug(f"Unsubscribed: {subscription_id}")

    def publish(self, event_type: str, *args) -> int:
        """
        Publish an event to all subscribers.

        Args:
            event_type: Type of event
            *args: Positional arguments passed to every listener

        Returns:
            int: Number of listeners called
        """
        # Snapshot: listeners may subscribe/unsubscribe while we iterate
        matching_subs = list(self._subscriptions.get(event_type, ()))
        called = 0

        for subscription in matching_subs:
            if not subscription.active:
                continue
            if subscription.once:
                self.unsubscribe(subscription.id)
            subscription(*args)
            called += 1

        return called

    def remove_all_listeners(self) -> None:
        """Clear all subscriptions."""
        for subscription in self._subscription_map.values():
            subscription.active = False
        self._subscriptions.clear()
        self._subscription_map.clear()

    def get_subscription_count(self) -> int:
        """Get total number of active subscriptions."""
        return len(self._subscription_map)

    def get_subscriptions_for_type(self, event_type: str) -> int:
        """Get number of subscriptions for a specific event type."""
        return len(self._subscriptions.get(event_type, []))
