"""
Basic test fixtures for the skirmish test suite.

Provides simple fixtures for characters, the event bus and the resolver.
"""

import sys
import os
import pytest

# Make the package and the tests helpers importable without installation
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, "src"))
sys.path.insert(0, project_root)

from skirmish.core.config import CombatConfig
from skirmish.core.data import CharacterClass
from skirmish.core.events import EventManager
from skirmish.game.combat_resolver import CombatResolver
from skirmish.game.entities import Character, Prop
from skirmish.game.log_manager import LogManager
from skirmish.game.session import CombatSession


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager subscribed to the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def resolver(event_manager):
    """Create a resolver that publishes to the test event manager."""
    return CombatResolver(event_manager, CombatConfig())


@pytest.fixture
def session():
    """Create a fully wired combat session."""
    combat_session = CombatSession(CombatConfig())
    yield combat_session
    combat_session.shutdown()


@pytest.fixture
def default_character():
    """Full-health level 1 melee character."""
    return Character()


@pytest.fixture
def ranged_character():
    """Full-health level 1 ranged character."""
    return Character(1000, 1, CharacterClass.RANGED)


@pytest.fixture
def crate():
    """A destructible prop."""
    return Prop(50)


@pytest.fixture
def allied_pair():
    """Two characters sharing Faction-A."""
    first = Character().join_faction("Faction-A")
    second = Character().join_faction("Faction-A")
    return first, second
