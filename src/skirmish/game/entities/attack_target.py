"""Tagged union over the things that can be attacked.

AttackTarget pairs an entity with a TargetKind tag instead of making Character
and Prop share a base class. Code that needs to branch on the kind of target
checks the tag; code that only needs health and liveness uses the shared
accessors.
"""

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from ...core.data import TargetKind, TARGET_KIND_NAMES
from .character import Character
from .prop import Prop


@runtime_checkable
class Attackable(Protocol):
    """Capabilities every attackable entity exposes."""

    @property
    def health(self) -> int: ...

    @property
    def alive(self) -> bool: ...

    @property
    def destroyed(self) -> bool: ...


@dataclass(frozen=True)
class AttackTarget:
    """Uniform handle for an attackable Character or Prop."""
    kind: TargetKind
    entity: Union[Character, Prop]

    def __post_init__(self):
        expected = Character if self.kind is TargetKind.CHARACTER else Prop
        if not isinstance(self.entity, expected):
            raise ValueError(
                f"{TARGET_KIND_NAMES[self.kind]} target cannot wrap {type(self.entity).__name__}"
            )

    @classmethod
    def character(cls, character: Character) -> "AttackTarget":
        return cls(TargetKind.CHARACTER, character)

    @classmethod
    def prop(cls, prop: Prop) -> "AttackTarget":
        return cls(TargetKind.PROP, prop)

    @classmethod
    def of(cls, target: Union[Character, Prop, "AttackTarget"]) -> "AttackTarget":
        """Wrap an entity, passing existing handles through.

        Raises:
            TypeError: If target is not attackable
        """
        if isinstance(target, AttackTarget):
            return target
        if isinstance(target, Character):
            return cls.character(target)
        if isinstance(target, Prop):
            return cls.prop(target)
        raise TypeError(f"Cannot attack object of type {type(target).__name__}")

    # ============== Shared Accessors ==============

    @property
    def health(self) -> int:
        return self.entity.health

    @property
    def alive(self) -> bool:
        return self.entity.alive

    @property
    def destroyed(self) -> bool:
        return not self.alive

    @property
    def is_character(self) -> bool:
        return self.kind is TargetKind.CHARACTER

    @property
    def is_prop(self) -> bool:
        return self.kind is TargetKind.PROP

    # ============== Variant Access ==============

    def as_character(self) -> Character:
        """Get the wrapped character.

        Raises:
            TypeError: If this target wraps a prop
        """
        if not isinstance(self.entity, Character):
            raise TypeError("Target is a prop, not a character")
        return self.entity

    def as_prop(self) -> Prop:
        """Get the wrapped prop.

        Raises:
            TypeError: If this target wraps a character
        """
        if not isinstance(self.entity, Prop):
            raise TypeError("Target is a character, not a prop")
        return self.entity

    def with_health(self, health: int) -> "AttackTarget":
        """Same target with new health, rebuilt so derived state is recomputed."""
        return AttackTarget(self.kind, self.entity.with_health(health))
