"""Combat events and logging events.

This module defines the events the combat resolver publishes so that hosts,
loggers and tests can observe resolutions without coupling to the resolver.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events carry the turn they were produced on
- Snapshots are carried as-is; they are immutable, so sharing them is safe
- Events use proper enums instead of magic strings
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING, Union
from abc import ABC
from enum import Enum, auto

from ..data import BlockReason

if TYPE_CHECKING:
    from ...game.entities.character import Character
    from ...game.entities.prop import Prop


class EventType(Enum):
    """Types of events subscribers can listen to."""
    # Combat Events
    ATTACK_RESOLVED = auto()
    ATTACK_BLOCKED = auto()
    TARGET_DEFEATED = auto()

    # Healing Events
    HEAL_RESOLVED = auto()
    HEAL_BLOCKED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class AttackResolved(GameEvent):
    """Event emitted when an attack lands on its target."""
    attacker: "Character"
    target_before: Union["Character", "Prop"]
    target_after: Union["Character", "Prop"]
    damage_applied: int

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ATTACK_RESOLVED)


@dataclass(frozen=True)
class AttackBlocked(GameEvent):
    """Event emitted when an attack has no effect."""
    attacker: "Character"
    target: Union["Character", "Prop"]
    reason: BlockReason

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_BLOCKED)


@dataclass(frozen=True)
class TargetDefeated(GameEvent):
    """Event emitted when an attack takes a target from alive to dead or destroyed."""
    attacker: "Character"
    target: Union["Character", "Prop"]

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TARGET_DEFEATED)


@dataclass(frozen=True)
class HealResolved(GameEvent):
    """Event emitted when a heal is applied."""
    healer: "Character"
    target_before: "Character"
    target_after: "Character"
    amount_restored: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.HEAL_RESOLVED)


@dataclass(frozen=True)
class HealBlocked(GameEvent):
    """Event emitted when a heal has no effect."""
    healer: "Character"
    target: "Character"
    reason: BlockReason

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.HEAL_BLOCKED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: str
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)
