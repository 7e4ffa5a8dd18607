"""Entity model.

This package contains the immutable combat entities:
- character.py: Character snapshots with factions, attack and heal
- prop.py: Inert destructible props
- attack_target.py: Tagged union handle over Character and Prop
"""

from .character import Character
from .prop import Prop
from .attack_target import AttackTarget, Attackable

__all__ = [
    "Character",
    "Prop",
    "AttackTarget",
    "Attackable",
]
