"""Static combat information and rule constants.

Class data follows the same Info pattern used for every lookup table: a small
dataclass per entry and a module-level dict keyed by enum.
"""

from dataclasses import dataclass

from .game_enums import CharacterClass, CHARACTER_CLASS_NAMES


MAX_HEALTH = 1000
MIN_LEVEL = 1

# Level gap at which damage is scaled up (attacker higher) or down (lower)
LEVEL_GAP_THRESHOLD = 5


@dataclass(frozen=True)
class CharacterClassInfo:
    """Static information about a character class."""
    name: str
    attack_range: int


CHARACTER_CLASS_DATA = {
    CharacterClass.MELEE: CharacterClassInfo(
        name=CHARACTER_CLASS_NAMES[CharacterClass.MELEE],
        attack_range=2,
    ),
    CharacterClass.RANGED: CharacterClassInfo(
        name=CHARACTER_CLASS_NAMES[CharacterClass.RANGED],
        attack_range=20,
    ),
}


def get_attack_range(character_class: CharacterClass) -> int:
    """Attack range for a class."""
    return CHARACTER_CLASS_DATA[character_class].attack_range
