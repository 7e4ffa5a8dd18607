"""
Battle forecast calculations.

This module predicts the outcome of an attack without producing a new
snapshot, so a host can show "what would happen" before committing.
"""
from dataclasses import dataclass
from typing import Union

from .combat_rules import (
    attack_block_reason, damage_against, damage_multiplier_label,
    saturating_subtract, validate_non_negative,
)
from ..core.data import BlockReason
from .entities import AttackTarget, Character, Prop


@dataclass(frozen=True)
class BattleForecast:
    """Predicted result of one attack."""
    in_range: bool
    allied: bool
    damage_multiplier: str
    damage_applied: int
    resulting_health: int
    lethal: bool


class BattleCalculator:
    """Calculates attack forecasts."""

    @staticmethod
    def calculate_forecast(
        attacker: Character,
        target: Union[Character, Prop, AttackTarget],
        damage: int,
        distance: int
    ) -> BattleForecast:
        """
        Calculate the forecast for an attack.

        Args:
            attacker: The attacking character
            target: The character or prop that would be attacked
            damage: Base damage before level scaling
            distance: Distance to the target

        Returns:
            BattleForecast; damage_applied is 0 when the attack would be blocked
        """
        validate_non_negative(damage, "Damage")
        validate_non_negative(distance, "Attack range")

        handle = AttackTarget.of(target)
        reason = attack_block_reason(attacker, handle, distance)
        multiplier = BattleCalculator._multiplier_for(attacker, handle)

        if reason is not None:
            return BattleForecast(
                in_range=reason is not BlockReason.OUT_OF_RANGE,
                allied=BattleCalculator._is_allied(attacker, handle),
                damage_multiplier=multiplier,
                damage_applied=0,
                resulting_health=handle.health,
                lethal=False,
            )

        new_health = saturating_subtract(handle.health, damage_against(attacker, handle, damage))
        return BattleForecast(
            in_range=True,
            allied=False,
            damage_multiplier=multiplier,
            damage_applied=handle.health - new_health,
            resulting_health=new_health,
            lethal=handle.alive and new_health == 0,
        )

    @staticmethod
    def _multiplier_for(attacker: Character, target: AttackTarget) -> str:
        if target.is_prop:
            return "1.0"
        return damage_multiplier_label(attacker.level - target.as_character().level)

    @staticmethod
    def _is_allied(attacker: Character, target: AttackTarget) -> bool:
        return target.is_character and attacker.is_allied_with(target.as_character())
