"""Skirmish: combat resolution rules for characters and destructible props."""

from .core.data import CharacterClass, TargetKind, BlockReason, MAX_HEALTH
from .game.entities import AttackTarget, Character, Prop
from .game.combat_resolver import ActionOutcome, CombatResolver, CombatResult
from .game.battle_calculator import BattleCalculator, BattleForecast
from .game.session import CombatSession

__all__ = [
    "CharacterClass",
    "TargetKind",
    "BlockReason",
    "MAX_HEALTH",
    "AttackTarget",
    "Character",
    "Prop",
    "ActionOutcome",
    "CombatResolver",
    "CombatResult",
    "BattleCalculator",
    "BattleForecast",
    "CombatSession",
]
