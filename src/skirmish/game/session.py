"""
Combat session wiring.

Builds the event bus, the combat log and the resolver from one
configuration so a host game loop gets them already connected.
"""
from typing import Optional

from ..core.config import CombatConfig, load_combat_config
from ..core.events import EventManager
from .combat_resolver import CombatResolver
from .log_manager import LogManager, parse_log_level


class CombatSession:
    """Owns the event manager, log manager and resolver for one battle.

    Resolution is synchronous and the snapshots are immutable, but the host
    must still apply actions against the latest snapshot of each entity, one
    at a time. Two attacks resolved against the same stale snapshot would
    each overwrite the other's result.
    """

    def __init__(self, config: Optional[CombatConfig] = None):
        self.config = config or CombatConfig()

        self.event_manager = EventManager(enable_debug_logging=self.config.debug_logging)
        self.log_manager = LogManager(
            self.event_manager,
            max_messages=self.config.max_log_messages,
            default_level=parse_log_level(self.config.log_level),
        )
        self.event_manager.set_debug_callback(self.log_manager.debug)
        self.resolver = CombatResolver(self.event_manager, self.config)

        self.log_manager.system("Combat session initialized")

    @classmethod
    def from_config_file(cls, config_path: Optional[str] = None) -> "CombatSession":
        """Create a session from a YAML config, using defaults if it can't be read."""
        return cls(load_combat_config(config_path))

    def flush(self) -> int:
        """Deliver queued events to subscribers.

        Returns:
            Number of events processed
        """
        return self.event_manager.process_events()

    def shutdown(self) -> None:
        self.event_manager.shutdown()
