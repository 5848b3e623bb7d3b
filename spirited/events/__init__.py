"""Event emitter for playbacks."""

from .event_system import EventEmitter
from .event_types import EventType, Subscription

__all__ = ['EventEmitter', 'EventType', 'Subscription']
