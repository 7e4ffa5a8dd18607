"""
Combat rules shared by entities, the resolver and the battle calculator.

The entity methods, the resolver's outcome reporting and the forecast all
call these functions. The resolver's vectorized area attack mirrors
scale_damage and saturating_subtract with numpy and must stay in step.
"""
from typing import Optional, TYPE_CHECKING

from ..core.data import BlockReason, TargetKind, MAX_HEALTH, LEVEL_GAP_THRESHOLD

if TYPE_CHECKING:
    from .entities.character import Character
    from .entities.attack_target import AttackTarget


def validate_non_negative(value: int, name: str) -> int:
    """Reject negative amounts, distances and healths."""
    if value < 0:
        raise ValueError(f"{name} cannot be negative")
    return value


def damage_multiplier_label(level_diff: int) -> str:
    """Human-readable multiplier for a level gap."""
    if level_diff >= LEVEL_GAP_THRESHOLD:
        return "1.5"
    if level_diff <= -LEVEL_GAP_THRESHOLD:
        return "0.5"
    return "1.0"


def scale_damage(damage: int, attacker_level: int, target_level: int) -> int:
    """Scale damage by the attacker/target level gap.

    A gap of LEVEL_GAP_THRESHOLD or more in the attacker's favor adds half the
    damage; the same gap against the attacker removes half. Halves truncate.
    """
    level_diff = attacker_level - target_level
    if level_diff >= LEVEL_GAP_THRESHOLD:
        return damage + damage // 2
    if level_diff <= -LEVEL_GAP_THRESHOLD:
        return damage - damage // 2
    return damage


def saturating_subtract(health: int, damage: int) -> int:
    """Subtract damage from health, never going below zero."""
    return max(0, health - damage)


def capped_heal(health: int, amount: int, max_health: int = MAX_HEALTH) -> int:
    """Add healing to health, never going above max_health."""
    return min(health + amount, max_health)


def damage_against(attacker: "Character", target: "AttackTarget", damage: int) -> int:
    """Damage an attack would apply to a target before clamping.

    Props take flat damage; characters take level-scaled damage.
    """
    if target.kind is TargetKind.PROP:
        return damage
    return scale_damage(damage, attacker.level, target.as_character().level)


def attack_block_reason(
    attacker: "Character",
    target: "AttackTarget",
    attack_range: int
) -> Optional[BlockReason]:
    """Why an attack would have no effect, or None if it lands."""
    if attack_range > attacker.attack_range:
        return BlockReason.OUT_OF_RANGE
    # Props have no factions and can't be allied with anyone
    if target.kind is TargetKind.CHARACTER and attacker.is_allied_with(target.as_character()):
        return BlockReason.ALLIED_TARGET
    return None


def heal_block_reason(healer: "Character", target: "Character") -> Optional[BlockReason]:
    """Why a heal would have no effect, or None if it applies.

    Healing oneself bypasses the alliance check. "Oneself" means the same
    snapshot object; a separate character with equal fields still needs an
    alliance.
    """
    if not target.alive:
        return BlockReason.TARGET_DEAD
    if target is not healer and not healer.is_allied_with(target):
        return BlockReason.NOT_ALLIED
    return None
