"""
Event type definitions for playbacks.
"""
import uuid
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Subscription:
    """Subscription to an event type."""
    callback: Callable[..., None]
    event_type: str
    priority: int = 0
    once: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    active: bool = True

    def __call__(self, *args) -> None:
        """Call the subscription callback with the published arguments."""
        self.callback(*args)

    def __lt__(self, other: 'Subscription') -> bool:
        """Sort by priority (higher first)."""
        return self.priority > other.priority


class EventType:
    """Event type constants."""
    # Fired every tick that produced values: (*values, time, *entities)
    TICK = "tick"

    # Fired exactly once per transition to idle: ()
    END = "end"
