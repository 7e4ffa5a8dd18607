"""Centralized combat enums and constants.

This module contains the enums shared by the entity model, the combat rules
and the resolver, providing a single source of truth.
"""

from enum import Enum, auto


class CharacterClass(Enum):
    """Character classes. The class fixes a character's attack range."""
    MELEE = auto()
    RANGED = auto()


class TargetKind(Enum):
    """Discriminant for the attackable target union."""
    CHARACTER = auto()
    PROP = auto()


class ActionType(Enum):
    """Actions the combat resolver can resolve."""
    ATTACK = auto()
    HEAL = auto()


class BlockReason(Enum):
    """Why an action silently had no effect."""
    OUT_OF_RANGE = auto()
    ALLIED_TARGET = auto()
    TARGET_DEAD = auto()
    NOT_ALLIED = auto()


# Convenience mappings for display
CHARACTER_CLASS_NAMES = {
    CharacterClass.MELEE: "Melee",
    CharacterClass.RANGED: "Ranged",
}

TARGET_KIND_NAMES = {
    TargetKind.CHARACTER: "Character",
    TargetKind.PROP: "Prop",
}

ACTION_TYPE_NAMES = {
    ActionType.ATTACK: "Attack",
    ActionType.HEAL: "Heal",
}

BLOCK_REASON_NAMES = {
    BlockReason.OUT_OF_RANGE: "Out of range",
    BlockReason.ALLIED_TARGET: "Allied target",
    BlockReason.TARGET_DEAD: "Target dead",
    BlockReason.NOT_ALLIED: "Not allied",
}
