"""
Configuration management for TaskTabs.

Reads ~/.tasktabs/config.ini when present; environment variables override
file values. Nothing in the configuration is required.

Example config.ini:

    [display]
    theme = light
    title = My Tasks

    [behavior]
    confirm_clear = false
"""

import configparser
import os
from pathlib import Path
from typing import Any, Dict, Optional

from tasktabs.logging_config import get_logger

logger = get_logger(__name__)

THEME_NAMES = ("dark", "light")
DEFAULT_THEME = "dark"
DEFAULT_TITLE = "Task App (TM)"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str) -> Optional[bool]:
    """
    Parse a boolean environment variable.

    Returns:
        True/False for recognised values, None when unset or unrecognised
    """
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    if raw:
        logger.warning(f"Ignoring {name}={raw!r}: expected true/false")
    return None


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to ~/.tasktabs/config.ini
        """
        self.config_path = config_path or self._default_config_path()
        self._config = configparser.ConfigParser(interpolation=None)
        self._load()

    def _default_config_path(self) -> Path:
        return Path.home() / ".tasktabs" / "config.ini"

    def _load(self) -> None:
        """Load configuration from file, keeping defaults on any problem."""
        if not self.config_path.exists():
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")
            return

        try:
            self._config.read(self.config_path, encoding="utf-8")
            logger.info(f"Loaded configuration from {self.config_path}")
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read config file: {e}. Using defaults.")
            self._config = configparser.ConfigParser(interpolation=None)

    def get_display_config(self) -> Dict[str, Any]:
        """
        Get display configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKTABS_THEME (dark/light)
        - TASKTABS_TITLE

        Returns:
            Dictionary with 'theme' and 'title'
        """
        theme = (
            os.getenv("TASKTABS_THEME")
            or self._config.get("display", "theme", fallback=DEFAULT_THEME)
        ).strip().lower()
        if theme not in THEME_NAMES:
            logger.warning(f"Unknown theme '{theme}', using '{DEFAULT_THEME}'")
            theme = DEFAULT_THEME

        config = {
            "theme": theme,
            "title": os.getenv("TASKTABS_TITLE")
                     or self._config.get("display", "title", fallback=DEFAULT_TITLE),
        }

        logger.debug(f"Display config: theme={config['theme']}, title={config['title']}")

        return config

    def get_behavior_config(self) -> Dict[str, Any]:
        """
        Get behavior configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKTABS_CONFIRM_CLEAR

        Returns:
            Dictionary with 'confirm_clear'
        """
        confirm_clear = _env_bool("TASKTABS_CONFIRM_CLEAR")
        if confirm_clear is None:
            confirm_clear = self.get_bool("behavior", "confirm_clear", fallback=True)

        config = {"confirm_clear": confirm_clear}

        logger.debug(f"Behavior config: confirm_clear={config['confirm_clear']}")

        return config

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get configuration value with fallback.

        Args:
            section: Config section name
            key: Config key name
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        return self._config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get boolean configuration value.

        Malformed values log a warning and return the fallback.
        """
        try:
            return self._config.getboolean(section, key, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid boolean for [{section}] {key}, using {fallback}")
            return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """
        Get integer configuration value.

        Malformed values log a warning and return the fallback.
        """
        try:
            return self._config.getint(section, key, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid integer for [{section}] {key}, using {fallback}")
            return fallback

    def has_section(self, section: str) -> bool:
        return self._config.has_section(section)

    def sections(self) -> list:
        return self._config.sections()
