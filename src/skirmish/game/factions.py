"""
Faction membership helpers.

A character's factions are an ordered tuple of faction ids, or None when the
character belongs to no faction. An empty tuple is never stored. Alliance is
derived from two collections on demand and never recorded globally.
"""
from typing import Iterable, Optional


FactionIds = Optional[tuple[str, ...]]


def validate_faction_id(faction_id: str) -> str:
    """Check a faction id is a non-empty string and return it."""
    if not isinstance(faction_id, str):
        raise ValueError(f"Faction id must be a string, got {type(faction_id).__name__}")
    if not faction_id:
        raise ValueError("Faction id cannot be empty")
    return faction_id


def normalize_factions(factions: Optional[Iterable[str]]) -> FactionIds:
    """Convert any iterable of ids to the stored form.

    Order and duplicates are preserved. An empty collection becomes None.
    """
    if factions is None:
        return None
    if isinstance(factions, str):
        # A bare string would otherwise be split into single-letter factions
        factions = (factions,)
    normalized = tuple(validate_faction_id(f) for f in factions)
    return normalized or None


def add_faction(factions: FactionIds, faction_id: str) -> tuple[str, ...]:
    """Append a faction id. Ids already present are appended again."""
    return (factions or ()) + (validate_faction_id(faction_id),)


def remove_faction(factions: FactionIds, faction_id: str) -> FactionIds:
    """Drop every occurrence of a faction id."""
    if factions is None:
        return None
    remaining = tuple(f for f in factions if f != faction_id)
    return remaining or None


def factions_intersect(ours: FactionIds, theirs: FactionIds) -> bool:
    """True when both collections exist and share at least one id."""
    if not ours or not theirs:
        return False
    return any(faction in theirs for faction in ours)
