"""Core data definitions.

This package contains fundamental combat types and lookup tables:
- game_enums.py: Centralized enums for classes, target kinds, block reasons
- game_info.py: Rule constants and static class data
"""

from .game_enums import (
    CharacterClass, TargetKind, ActionType, BlockReason,
    CHARACTER_CLASS_NAMES, TARGET_KIND_NAMES, ACTION_TYPE_NAMES, BLOCK_REASON_NAMES,
)
from .game_info import (
    MAX_HEALTH, MIN_LEVEL, LEVEL_GAP_THRESHOLD,
    CharacterClassInfo, CHARACTER_CLASS_DATA, get_attack_range,
)

__all__ = [
    "CharacterClass",
    "TargetKind",
    "ActionType",
    "BlockReason",
    "CHARACTER_CLASS_NAMES",
    "TARGET_KIND_NAMES",
    "ACTION_TYPE_NAMES",
    "BLOCK_REASON_NAMES",
    "MAX_HEALTH",
    "MIN_LEVEL",
    "LEVEL_GAP_THRESHOLD",
    "CharacterClassInfo",
    "CHARACTER_CLASS_DATA",
    "get_attack_range",
]
