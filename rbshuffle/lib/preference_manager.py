"""User preferences management with config file persistence."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Any

from rbshuffle.lib.get_platform import get_data_directory, get_default_playlists_path

SECTION = "USERPREFERENCES"


class PreferenceManager:
    """Single source of truth for user-configurable settings.

    Stores settings in config.ini under [USERPREFERENCES] section and handles
    persistence and type conversion.
    """

    # Default values for all user preferences (single source of truth)
    DEFAULTS = {
        # Resolved against the home directory at lookup time
        "playlists_path": None,
        "shuffle_dirs": True,
        "shuffle_in_dir": True,
        "in_place": False,
        "display": False,
        "display_all": False,
    }

    def __init__(self, config_file_path: str = "config.ini") -> None:
        """Initialize with a config path.

        Args:
            config_file_path: Path to config.ini (relative paths go in data directory)
        """
        self._config_obj = configparser.ConfigParser()

        if not os.path.isabs(config_file_path):
            self.config_file_path = os.path.join(get_data_directory(), config_file_path)
        else:
            self.config_file_path = config_file_path

        logging.debug(f"Using config file: {self.config_file_path}")

    def get(self, preference: str, default_value: Any = None) -> Any:
        """Get a preference value, auto-converting to bool/int/float."""
        # Silently ignores missing files
        self._config_obj.read(self.config_file_path, encoding="utf-8")

        if not self._config_obj.has_section(SECTION):
            return default_value

        try:
            pref = self._config_obj.get(SECTION, preference)
            return self._convert_value(pref)
        except (configparser.NoOptionError, ValueError):
            return default_value

    def set(self, preference: str, val: Any) -> tuple[bool, str]:
        """Update a preference and persist it to the config file.

        Returns (success, message) tuple.
        """
        logging.debug(f"Changing user preference << {preference} >> to {val}")
        try:
            # Read existing config to preserve other preferences
            self._config_obj.read(self.config_file_path, encoding="utf-8")

            if SECTION not in self._config_obj:
                self._config_obj.add_section(SECTION)

            self._config_obj[SECTION][preference] = str(val)

            with open(self.config_file_path, "w", encoding="utf-8") as conf:
                self._config_obj.write(conf)

            return (True, "Your preferences were changed successfully")
        except (OSError, configparser.Error) as e:
            logging.error(f"Failed to change user preference << {preference} >>: {e}")
            return (False, "Something went wrong! Your preferences were not changed")

    def _convert_value(self, val: Any) -> Any:
        """Convert a string to bool/int/float if applicable, otherwise return as-is."""
        if not isinstance(val, str):
            return val

        val_lower = val.lower()
        if val_lower in ("true", "yes", "on"):
            return True
        if val_lower in ("false", "no", "off"):
            return False

        # Try numeric conversion: integer first, then float
        stripped = val.lstrip("-")
        if stripped.isdigit():
            return int(val)
        if stripped.replace(".", "", 1).isdigit():
            return float(val)

        return val

    def resolve(self, persist: bool = False, **cli_overrides: Any) -> dict[str, Any]:
        """Resolve every preference to its effective value.

        Priority: CLI argument (if provided) > config file > DEFAULTS

        A CLI argument counts as provided when it is not None. With ``persist``
        the provided CLI arguments are written to the config file.

        Args:
            persist: Save the provided CLI arguments to the config file.
            **cli_overrides: CLI arguments that should override config values
        """
        resolved: dict[str, Any] = {}
        for pref, default in self.DEFAULTS.items():
            cli_value = cli_overrides.get(pref)
            if cli_value is not None:
                resolved[pref] = cli_value
                if persist:
                    self.set(pref, cli_value)
            else:
                resolved[pref] = self.get(pref, default)

        if resolved["playlists_path"] is None:
            resolved["playlists_path"] = get_default_playlists_path()

        # display_all implies display
        if resolved["display_all"]:
            resolved["display"] = True

        return resolved
