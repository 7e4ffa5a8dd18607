"""
Configuration loader for the combat runtime.

This module handles loading and parsing of the YAML file that tunes the
resolver's logging behavior. Rule constants are not configurable.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml


DEFAULT_CONFIG_PATH = "config/combat.yaml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class CombatConfig:
    """Runtime settings for the resolver and its log."""
    debug_logging: bool = False
    max_log_messages: int = 1000
    log_level: str = "INFO"
    log_blocked_actions: bool = True

    def __post_init__(self):
        if self.max_log_messages <= 0:
            raise ValueError("max_log_messages must be positive")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CombatConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


class ConfigLoader:
    """Loads the combat configuration from a YAML file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._raw: dict[str, Any] = {}
        self._config = CombatConfig()
        self.last_error: Optional[str] = None

    def _resolve_path(self) -> Path:
        if os.path.isabs(self.config_path):
            return Path(self.config_path)
        # Relative paths are relative to the project root
        project_root = Path(__file__).resolve().parent.parent.parent.parent
        return project_root / self.config_path

    def load_config(self) -> bool:
        """
        Load configuration from the YAML file.

        Returns:
            bool: True if config was loaded successfully
        """
        config_file = self._resolve_path()

        if not config_file.exists():
            self.last_error = f"Combat config file not found: {config_file}"
            print(f"Warning: {self.last_error}")
            self._load_fallback_config()
            return False

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self._raw = yaml.safe_load(f) or {}
            if not isinstance(self._raw, dict):
                raise ValueError("top level of combat config must be a mapping")
            self._config = CombatConfig.from_dict(self._raw.get('combat', {}) or {})
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            self.last_error = f"Error loading combat config: {e}"
            print(self.last_error)
            self._load_fallback_config()
            return False

        self.last_error = None
        return True

    def _load_fallback_config(self) -> None:
        self._raw = {}
        self._config = CombatConfig()

    def get_config(self) -> CombatConfig:
        """Get the loaded (or fallback) configuration."""
        return self._config


def load_combat_config(config_path: Optional[str] = None) -> CombatConfig:
    """Load a config, falling back to defaults on any problem."""
    loader = ConfigLoader(config_path)
    loader.load_config()
    return loader.get_config()
