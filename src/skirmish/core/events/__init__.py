"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing around combat resolution:
- event_manager.py: Publisher-subscriber event routing
- events.py: Event definitions published by the resolver
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    AttackResolved,
    AttackBlocked,
    TargetDefeated,
    HealResolved,
    HealBlocked,
    LogMessage,
    DebugMessage,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "AttackResolved",
    "AttackBlocked",
    "TargetDefeated",
    "HealResolved",
    "HealBlocked",
    "LogMessage",
    "DebugMessage",
]
