"""
Unit tests for the Character snapshot.

Tests construction, derived state, attacks, heals and immutability.
"""
import dataclasses

import pytest

from skirmish.core.data import CharacterClass, MAX_HEALTH
from skirmish.game.entities import AttackTarget, Character, Prop
from tests.test_constants import (
    ADJACENT, FACTION_A, FACTION_B, FAR_AWAY, LETHAL_DAMAGE,
    MELEE_ATTACK_RANGE, RANGED_ATTACK_RANGE, SCENARIO_DAMAGE,
)


class TestCharacterConstruction:
    """Test character creation and derived state."""

    def test_create_default_character(self):
        """Test the default character."""
        character = Character.default()

        assert character.health == 1000
        assert character.level == 1
        assert character.character_class == CharacterClass.MELEE
        assert character.factions is None
        assert character.alive

    def test_no_arg_constructor_matches_default(self):
        assert Character() == Character.default()

    def test_positional_construction(self):
        character = Character(250, 7, CharacterClass.RANGED)

        assert character.health == 250
        assert character.level == 7
        assert character.character_class == CharacterClass.RANGED

    def test_zero_health_is_dead(self):
        character = Character(0, 1, CharacterClass.MELEE)

        assert not character.alive
        assert character.destroyed

    @pytest.mark.parametrize("character_class,expected_range", [
        (CharacterClass.MELEE, MELEE_ATTACK_RANGE),
        (CharacterClass.RANGED, RANGED_ATTACK_RANGE),
    ])
    def test_attack_range_follows_class(self, character_class, expected_range):
        assert Character(100, 1, character_class).attack_range == expected_range

    def test_class_info(self):
        assert Character().class_info.name == "Melee"
        assert Character(1, 1, CharacterClass.RANGED).class_info.name == "Ranged"

    def test_is_immutable(self):
        character = Character()

        with pytest.raises(dataclasses.FrozenInstanceError):
            character.health = 5  # type: ignore[misc]

    def test_factions_list_is_normalized_to_tuple(self):
        character = Character(factions=[FACTION_A, FACTION_B])

        assert character.factions == (FACTION_A, FACTION_B)

    def test_empty_factions_normalized_to_none(self):
        assert Character(factions=[]).factions is None
        assert Character(factions=()).factions is None


class TestCharacterAttack:
    """Test attack resolution through Character.attack."""

    def test_lethal_attack(self):
        """Same-level attack for 1000 at range 1 kills a full-health target."""
        attacker = Character.default()
        defender = Character.default()

        defender = attacker.attack(defender, LETHAL_DAMAGE, ADJACENT)

        assert defender.health == 0
        assert not defender.alive

    def test_weaker_attacker_deals_half_damage(self):
        attacker = Character(1000, 10, CharacterClass.MELEE)
        stronger_defender = Character(1000, 20, CharacterClass.MELEE)

        stronger_defender = attacker.attack(stronger_defender, SCENARIO_DAMAGE, ADJACENT)

        assert stronger_defender.health == 900

    def test_stronger_attacker_deals_bonus_damage(self):
        attacker = Character(1000, 10, CharacterClass.MELEE)
        weaker_defender = Character(1000, 1, CharacterClass.MELEE)

        weaker_defender = attacker.attack(weaker_defender, SCENARIO_DAMAGE, ADJACENT)

        assert weaker_defender.health == 700

    def test_small_level_gap_is_unscaled(self):
        attacker = Character(1000, 5, CharacterClass.MELEE)
        defender = Character(1000, 1, CharacterClass.MELEE)

        assert attacker.attack(defender, SCENARIO_DAMAGE, ADJACENT).health == 800

    def test_melee_range(self):
        melee_fighter = Character(1000, 1, CharacterClass.MELEE)

        out_of_range_target = melee_fighter.attack(Character.default(), LETHAL_DAMAGE, 5)
        in_range_target = melee_fighter.attack(Character.default(), LETHAL_DAMAGE, ADJACENT)

        assert out_of_range_target.health == 1000
        assert in_range_target.health == 0

    def test_ranged_range(self):
        ranged_fighter = Character(1000, 1, CharacterClass.RANGED)

        out_of_range_target = ranged_fighter.attack(Character.default(), LETHAL_DAMAGE, FAR_AWAY)
        in_range_target = ranged_fighter.attack(Character.default(), LETHAL_DAMAGE, RANGED_ATTACK_RANGE)

        assert out_of_range_target.health == 1000
        assert in_range_target.health == 0

    def test_range_boundary_is_inclusive(self):
        attacker = Character()

        assert attacker.attack(Character(), 10, MELEE_ATTACK_RANGE).health == 990
        assert attacker.attack(Character(), 10, MELEE_ATTACK_RANGE + 1).health == 1000

    def test_overkill_clamps_to_zero(self):
        attacker = Character()
        defender = Character(30, 1, CharacterClass.MELEE)

        defender = attacker.attack(defender, 500, ADJACENT)

        assert defender.health == 0
        assert not defender.alive

    def test_attack_does_not_change_original(self):
        attacker = Character()
        defender = Character()

        attacker.attack(defender, 100, ADJACENT)

        assert defender.health == 1000

    def test_allies_cannot_damage_each_other(self):
        attacker = Character().join_faction(FACTION_A)
        ally = Character().join_faction(FACTION_A)
        non_ally = Character()

        ally = attacker.attack(ally, LETHAL_DAMAGE, ADJACENT)
        non_ally = attacker.attack(non_ally, LETHAL_DAMAGE, ADJACENT)

        assert ally.health == 1000
        assert non_ally.health == 0

    def test_damaged_character_keeps_factions(self):
        attacker = Character()
        defender = Character().join_faction(FACTION_B)

        defender = attacker.attack(defender, 100, ADJACENT)

        assert defender.health == 900
        assert defender.factions == (FACTION_B,)

    def test_damaged_character_keeps_level_and_class(self):
        attacker = Character(1000, 1, CharacterClass.RANGED)
        defender = Character(1000, 3, CharacterClass.RANGED)

        defender = attacker.attack(defender, 100, 10)

        assert defender.level == 3
        assert defender.character_class == CharacterClass.RANGED

    def test_attack_returns_same_shape(self):
        attacker = Character()

        assert isinstance(attacker.attack(Character(), 1, ADJACENT), Character)
        assert isinstance(attacker.attack(Prop(10), 1, ADJACENT), Prop)
        assert isinstance(attacker.attack(AttackTarget.prop(Prop(10)), 1, ADJACENT), AttackTarget)

    def test_attacking_dead_character_stays_dead(self):
        attacker = Character()
        corpse = Character(0, 1, CharacterClass.MELEE)

        corpse = attacker.attack(corpse, 100, ADJACENT)

        assert corpse.health == 0
        assert not corpse.alive

    def test_strike_on_handles(self):
        attacker = Character().join_faction("A")
        ally = AttackTarget.character(Character().join_faction("A"))
        crate = AttackTarget.prop(Prop(40))

        assert attacker.strike(ally, 100, ADJACENT) is ally
        assert attacker.strike(crate, 100, ADJACENT).destroyed
        assert attacker.strike(crate, 100, 3) is crate


class TestCharacterHeal:
    """Test self-heal and healing others."""

    def test_heal_and_cap(self):
        healer = Character(100, 1, CharacterClass.MELEE)

        healer = healer.heal(100)
        assert healer.health == 200

        healer = healer.heal(1000)
        assert healer.health == MAX_HEALTH

    def test_dead_cannot_heal(self):
        healer = Character(0, 1, CharacterClass.MELEE)

        healer = healer.heal(100)

        assert healer.health == 0
        assert not healer.alive

    def test_heal_self_alias(self):
        character = Character(500, 1, CharacterClass.MELEE)

        assert character.heal_self(50) == character.heal(50)

    def test_heal_keeps_factions(self):
        character = Character(500, 1, CharacterClass.MELEE).join_faction(FACTION_A)

        assert character.heal(10).factions == (FACTION_A,)

    def test_heal_ally(self):
        healer = Character().join_faction(FACTION_A)
        ally = Character(400, 2, CharacterClass.RANGED).join_faction(FACTION_A)

        ally = healer.heal_others(ally, 250)

        assert ally.health == 650
        assert ally.level == 2
        assert ally.character_class == CharacterClass.RANGED

    def test_cannot_heal_non_ally(self):
        healer = Character().join_faction(FACTION_A)
        stranger = Character(400, 1, CharacterClass.MELEE).join_faction(FACTION_B)

        assert healer.heal_others(stranger, 250).health == 400

    def test_faction_less_healer_cannot_heal_others(self):
        healer = Character(1000, 2, CharacterClass.MELEE)
        target = Character(400, 1, CharacterClass.MELEE)

        assert healer.heal_others(target, 250).health == 400

    def test_heal_others_on_self_bypasses_alliance(self):
        healer = Character(300, 1, CharacterClass.MELEE)

        assert healer.heal_others(healer, 100).health == 400

    def test_equal_stranger_is_not_self(self):
        healer = Character(300, 1, CharacterClass.MELEE)
        twin = Character(300, 1, CharacterClass.MELEE)

        assert twin == healer
        assert healer.heal_others(twin, 100).health == 300
        assert twin.heal_others(healer, 100).health == 300

    def test_cannot_revive_dead_ally(self):
        healer = Character().join_faction(FACTION_A)
        fallen = Character(0, 1, CharacterClass.MELEE).join_faction(FACTION_A)

        fallen = healer.heal_others(fallen, 500)

        assert fallen.health == 0
        assert not fallen.alive
