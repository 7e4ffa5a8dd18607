"""Inert destructible props."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Prop:
    """Immutable prop snapshot. Props have health but no level or factions."""
    health: int

    def __post_init__(self):
        if self.health < 0:
            raise ValueError(f"Prop health cannot be negative, got {self.health}")

    @property
    def destroyed(self) -> bool:
        return self.health == 0

    @property
    def alive(self) -> bool:
        return not self.destroyed

    def with_health(self, health: int) -> "Prop":
        return replace(self, health=health)
