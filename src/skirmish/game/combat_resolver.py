"""
Combat resolution service.

This module wraps the entity rules for a host game loop: it resolves attacks
and heals, reports what happened (including why an action had no effect) and
publishes events for loggers and observers. The entity methods stay the
single source of truth for the outcome itself.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from ..core.config import CombatConfig
from ..core.data import (
    ActionType, BlockReason, LEVEL_GAP_THRESHOLD, ACTION_TYPE_NAMES, BLOCK_REASON_NAMES,
)
from ..core.events import (
    AttackBlocked, AttackResolved, HealBlocked, HealResolved, LogMessage, TargetDefeated,
)
from .combat_rules import attack_block_reason, heal_block_reason, validate_non_negative
from .entities import AttackTarget, Attackable, Character, Prop

if TYPE_CHECKING:
    from ..core.events import EventManager


Snapshot = Union[Character, Prop]

# Largest health, damage, level or distance the int64 area path accepts.
# Scaled damage is at most 1.5x this, which still fits in int64.
AOE_VALUE_LIMIT = int(np.iinfo(np.int64).max) // 2


@dataclass(frozen=True)
class ActionOutcome:
    """Result of resolving a single attack or heal."""
    action: ActionType
    actor: Character
    before: Attackable
    after: Attackable
    blocked: Optional[BlockReason] = None

    @property
    def amount(self) -> int:
        """Health actually removed (attack) or restored (heal)."""
        return abs(self.before.health - self.after.health)

    @property
    def succeeded(self) -> bool:
        return self.blocked is None

    @property
    def defeated(self) -> bool:
        """True when this action took the target from alive to dead."""
        return self.before.alive and not self.after.alive


class CombatResult:
    """Result of a multi-target attack."""

    def __init__(self):
        self.outcomes: list[ActionOutcome] = []

    @property
    def targets(self) -> list[Snapshot]:
        """New snapshots, in the order the targets were given."""
        return [outcome.after for outcome in self.outcomes]

    @property
    def damage_dealt(self) -> list[int]:
        return [outcome.amount for outcome in self.outcomes]

    @property
    def total_damage(self) -> int:
        return sum(self.damage_dealt)

    @property
    def defeated_indices(self) -> list[int]:
        return [i for i, outcome in enumerate(self.outcomes) if outcome.defeated]

    @property
    def blocked(self) -> dict[int, BlockReason]:
        return {
            i: outcome.blocked
            for i, outcome in enumerate(self.outcomes)
            if outcome.blocked is not None
        }

    @property
    def friendly_fire(self) -> bool:
        """True if any target was spared because it is an ally."""
        return BlockReason.ALLIED_TARGET in self.blocked.values()


def describe(entity: Attackable) -> str:
    """Short label for log lines."""
    if not isinstance(entity, Character):
        return f"Prop({entity.health} HP)"
    return f"{entity.class_info.name} L{entity.level} ({entity.health} HP)"


def _check_aoe_limit(name: str, values: Sequence[int]) -> None:
    largest = max(values, default=0)
    if largest > AOE_VALUE_LIMIT:
        raise ValueError(f"{name} {largest} exceeds the area attack limit of {AOE_VALUE_LIMIT}")


class CombatResolver:
    """Resolves attacks and heals and reports them as events."""

    def __init__(
        self,
        event_manager: Optional["EventManager"] = None,
        config: Optional[CombatConfig] = None
    ):
        self.event_manager = event_manager
        self.config = config or CombatConfig()

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source="CombatResolver")

    def _emit_log(self, message: str, turn: int, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self._publish(
            LogMessage(
                turn=turn,
                message=message,
                category=category,
                level=level,
                source="CombatResolver"
            )
        )

    def _emit_blocked(self, outcome: ActionOutcome, turn: int) -> None:
        if self.config.log_blocked_actions:
            self._emit_log(
                f"{ACTION_TYPE_NAMES[outcome.action]} by {describe(outcome.actor)} on "
                f"{describe(outcome.before)} blocked: {BLOCK_REASON_NAMES[outcome.blocked]}",
                turn, "DEBUG", "DEBUG"
            )

    # ============== Attacks ==============

    def resolve_attack(
        self,
        attacker: Character,
        target: Snapshot,
        damage: int,
        distance: int,
        turn: int = 0
    ) -> ActionOutcome:
        """
        Resolve a single attack.

        Args:
            attacker: The attacking character
            target: The character or prop being attacked
            damage: Base damage before level scaling
            distance: Distance between attacker and target
            turn: Turn number stamped on published events

        Returns:
            ActionOutcome with the target's new snapshot
        """
        handle = AttackTarget.of(target)
        after = attacker.strike(handle, damage, distance).entity
        reason = attack_block_reason(attacker, handle, distance)

        outcome = ActionOutcome(ActionType.ATTACK, attacker, handle.entity, after, reason)
        self._report_attack(outcome, turn)
        return outcome

    def execute_aoe_attack(
        self,
        attacker: Character,
        targets: Sequence[Snapshot],
        damage: int,
        distances: Sequence[int],
        turn: int = 0
    ) -> CombatResult:
        """
        Resolve one attack against many targets using vectorized operations.

        Each target is resolved exactly as Character.attack would resolve it
        on its own. Values above AOE_VALUE_LIMIT raise ValueError instead of
        overflowing the int64 arrays.

        Args:
            attacker: The attacking character
            targets: Characters and props hit by the attack
            damage: Base damage before level scaling
            distances: Distance to each target, same length as targets
            turn: Turn number stamped on published events

        Returns:
            CombatResult with one outcome per target, in order
        """
        validate_non_negative(damage, "Damage")
        if len(targets) != len(distances):
            raise ValueError(
                f"Got {len(targets)} targets but {len(distances)} distances"
            )

        result = CombatResult()
        if not targets:
            return result

        handles = [AttackTarget.of(t) for t in targets]
        for distance in distances:
            validate_non_negative(distance, "Attack range")
        _check_aoe_limit("Damage", [damage])
        _check_aoe_limit("Attack range", distances)
        _check_aoe_limit("Health", [h.health for h in handles])
        _check_aoe_limit(
            "Level", [attacker.level] + [h.as_character().level for h in handles if h.is_character]
        )

        ranges = np.asarray(distances, dtype=np.int64)
        healths = np.array([h.health for h in handles], dtype=np.int64)
        # Props take flat damage: give them the attacker's level so the gap is zero
        levels = np.array(
            [h.as_character().level if h.is_character else attacker.level for h in handles],
            dtype=np.int64
        )
        allied = np.array(
            [h.is_character and attacker.is_allied_with(h.as_character()) for h in handles],
            dtype=bool
        )

        in_range = ranges <= attacker.attack_range
        hits = in_range & ~allied

        level_diff = attacker.level - levels
        half = damage // 2
        applied = np.where(
            level_diff >= LEVEL_GAP_THRESHOLD,
            damage + half,
            np.where(level_diff <= -LEVEL_GAP_THRESHOLD, damage - half, damage)
        )
        new_healths = np.where(hits, np.maximum(0, healths - applied), healths)

        for idx, handle in enumerate(handles):
            if not in_range[idx]:
                reason = BlockReason.OUT_OF_RANGE
            elif allied[idx]:
                reason = BlockReason.ALLIED_TARGET
            else:
                reason = None

            if reason is None:
                after = handle.with_health(int(new_healths[idx])).entity
            else:
                after = handle.entity
            outcome = ActionOutcome(ActionType.ATTACK, attacker, handle.entity, after, reason)
            result.outcomes.append(outcome)
            self._report_attack(outcome, turn)

        if len(result.outcomes) > 1:
            self._emit_log(
                f"{describe(attacker)}: area attack → {len(result.outcomes)} targets, "
                f"{result.total_damage} total damage",
                turn
            )
        return result

    def _report_attack(self, outcome: ActionOutcome, turn: int) -> None:
        if outcome.blocked is not None:
            self._publish(AttackBlocked(turn, outcome.actor, outcome.before, outcome.blocked))
            self._emit_blocked(outcome, turn)
            return

        self._publish(AttackResolved(turn, outcome.actor, outcome.before, outcome.after, outcome.amount))
        self._emit_log(
            f"{describe(outcome.actor)} → {describe(outcome.before)} ({outcome.amount} damage)",
            turn
        )
        if outcome.defeated:
            self._publish(TargetDefeated(turn, outcome.actor, outcome.after))
            label = "Destroyed" if isinstance(outcome.after, Prop) else "Defeated"
            self._emit_log(f"{describe(outcome.after)}: {label}", turn)

    # ============== Heals ==============

    def resolve_heal(
        self,
        healer: Character,
        target: Character,
        amount: int,
        turn: int = 0
    ) -> ActionOutcome:
        """
        Resolve a heal. Passing the healer as its own target is a self-heal.

        Returns:
            ActionOutcome with the target's new snapshot
        """
        after = healer.heal_others(target, amount)
        reason = heal_block_reason(healer, target)
        outcome = ActionOutcome(ActionType.HEAL, healer, target, after, reason)

        if reason is not None:
            self._publish(HealBlocked(turn, healer, target, reason))
            self._emit_blocked(outcome, turn)
        else:
            self._publish(HealResolved(turn, healer, target, after, outcome.amount))
            self._emit_log(
                f"{describe(healer)} heals {describe(target)} (+{outcome.amount} HP)",
                turn,
                category="HEALING"
            )
        return outcome

    def resolve_self_heal(self, character: Character, amount: int, turn: int = 0) -> ActionOutcome:
        """Resolve a character healing itself."""
        return self.resolve_heal(character, character, amount, turn)
