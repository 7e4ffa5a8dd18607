"""Character snapshots.

A Character is an immutable value: attacking, healing and changing factions
all return a new Character. Callers must replace their reference with the
returned snapshot; nothing is ever updated in place.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union, TYPE_CHECKING

from ...core.data import (
    CharacterClass, CharacterClassInfo, CHARACTER_CLASS_DATA,
    MAX_HEALTH, MIN_LEVEL, get_attack_range,
)
from ..combat_rules import (
    attack_block_reason, capped_heal, damage_against, heal_block_reason,
    saturating_subtract, validate_non_negative,
)
from ..factions import (
    FactionIds, add_faction, factions_intersect, normalize_factions, remove_faction,
)

if TYPE_CHECKING:
    from .attack_target import AttackTarget
    from .prop import Prop


@dataclass(frozen=True)
class Character:
    """Immutable character snapshot.

    Attributes:
        health: Current hit points, 0 to MAX_HEALTH
        level: Character level, at least 1
        character_class: Fixed class; determines attack range
        factions: Ordered faction ids, or None for no factions

    Derived state (alive, attack_range) is computed from the fields, so it can
    never disagree with them.

    Examples:
        attacker = Character(1000, 10, CharacterClass.MELEE)
        defender = attacker.attack(Character(), 200, 1)
        defender = defender.heal(50)
    """
    health: int = MAX_HEALTH
    level: int = MIN_LEVEL
    character_class: CharacterClass = CharacterClass.MELEE
    factions: FactionIds = None

    def __post_init__(self):
        if not 0 <= self.health <= MAX_HEALTH:
            raise ValueError(f"Health must be between 0 and {MAX_HEALTH}, got {self.health}")
        if self.level < MIN_LEVEL:
            raise ValueError(f"Level must be at least {MIN_LEVEL}, got {self.level}")
        if not isinstance(self.character_class, CharacterClass):
            raise ValueError(f"Unknown character class: {self.character_class!r}")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'factions', normalize_factions(self.factions))

    @classmethod
    def default(cls) -> "Character":
        """Full-health level 1 melee character with no factions."""
        return cls()

    # ============== Derived State ==============

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def destroyed(self) -> bool:
        return not self.alive

    @property
    def attack_range(self) -> int:
        return get_attack_range(self.character_class)

    @property
    def class_info(self) -> CharacterClassInfo:
        return CHARACTER_CLASS_DATA[self.character_class]

    def with_health(self, health: int) -> "Character":
        """Same character with different health; factions are kept."""
        return replace(self, health=health)

    # ============== Factions ==============

    def join_faction(self, faction_id: str) -> "Character":
        """Return a copy with faction_id appended to the faction list."""
        return replace(self, factions=add_faction(self.factions, faction_id))

    def leave_faction(self, faction_id: str) -> "Character":
        """Return a copy without any occurrence of faction_id.

        Leaving the last faction yields factions=None, not an empty tuple.
        """
        return replace(self, factions=remove_faction(self.factions, faction_id))

    def join_factions(self, faction_ids: Iterable[str]) -> "Character":
        """Join several factions in order."""
        character = self
        for faction_id in faction_ids:
            character = character.join_faction(faction_id)
        return character

    def has_faction(self, faction_id: str) -> bool:
        return self.factions is not None and faction_id in self.factions

    def is_allied_with(self, other: "Character") -> bool:
        """Check whether the two characters share at least one faction.

        A character without factions is allied with nobody, including other
        faction-less characters.
        """
        return factions_intersect(self.factions, other.factions)

    # ============== Combat ==============

    def attack(
        self,
        target: Union["Character", "Prop", "AttackTarget"],
        damage: int,
        attack_range: int
    ) -> Union["Character", "Prop", "AttackTarget"]:
        """Attack a character or prop at the given range.

        Args:
            target: Character, Prop, or AttackTarget wrapping either
            damage: Base damage before level scaling
            attack_range: Distance to the target

        Returns:
            The target's new snapshot, in the same form that was passed in.
            Out-of-range attacks and attacks on allies return the target
            unchanged.
        """
        from .attack_target import AttackTarget

        handle = AttackTarget.of(target)
        result = self.strike(handle, damage, attack_range)
        if isinstance(target, AttackTarget):
            return result
        return result.entity

    def strike(self, target: "AttackTarget", damage: int, attack_range: int) -> "AttackTarget":
        """Attack resolution on the tagged target handle."""
        validate_non_negative(damage, "Damage")
        validate_non_negative(attack_range, "Attack range")

        if attack_block_reason(self, target, attack_range) is not None:
            return target

        applied = damage_against(self, target, damage)
        return target.with_health(saturating_subtract(target.health, applied))

    # ============== Healing ==============

    def heal(self, amount: int) -> "Character":
        """Heal this character, capped at MAX_HEALTH. The dead stay dead."""
        return self.heal_others(self, amount)

    def heal_self(self, amount: int) -> "Character":
        """Alias of heal()."""
        return self.heal(amount)

    def heal_others(self, target: "Character", amount: int) -> "Character":
        """Heal another character.

        Only allies (or the healer itself) can be healed. A dead target comes
        back with health forced to 0; healing never revives.
        """
        validate_non_negative(amount, "Heal amount")

        if not target.alive:
            return target.with_health(0)
        if heal_block_reason(self, target) is not None:
            return target

        return target.with_health(capped_heal(target.health, amount))
