"""
Settings storage management for Link Relay.

YAML-based configuration file persistence with automatic directory creation
and default Settings when no configuration exists.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import Settings
from .validation import ConfigValidator

logger = logging.getLogger(__name__)


class SettingsStorage:
    """
    Reads and writes Link Relay settings as YAML.

    Configuration is stored at ~/.link-relay/config.yaml by default.

    Attributes:
        config_dir: Directory holding the configuration file.
        config_file: Path to config.yaml inside config_dir.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        """
        Initialize the settings storage.

        Args:
            config_dir: Optional path to configuration directory.
                       Defaults to ~/.link-relay/
        """
        self.config_dir = config_dir or Path.home() / ".link-relay"
        self.config_file = self.config_dir / "config.yaml"

    def load(self) -> Settings:
        """
        Load settings from the configuration file.

        Returns:
            Settings loaded from the config file, or default Settings if the
            file does not exist.
        """
        if not self.config_file.exists():
            return Settings()

        with open(self.config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return self._dict_to_settings(data)

    def save(self, settings: Settings) -> None:
        """
        Save settings to the configuration file.

        Args:
            settings: Settings object to save.
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.dump(
                self._settings_to_dict(settings),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

    def exists(self) -> bool:
        """Check if the configuration file exists."""
        return self.config_file.exists()

    def _settings_to_dict(self, settings: Settings) -> dict[str, Any]:
        return {
            "focus_command_timeout_seconds": settings.focus_command_timeout_seconds,
            "cursor_ai_focus_commands": list(settings.cursor_ai_focus_commands),
            "claude_code_focus_commands": list(settings.claude_code_focus_commands),
            "log_level": settings.log_level,
        }

    def _dict_to_settings(self, data: dict[str, Any]) -> Settings:
        """
        Build Settings from loaded YAML data.

        Fields that fail validation are logged and replaced by their defaults,
        so a bad value never reaches the destinations.
        """
        defaults = Settings()

        timeout = data.get("focus_command_timeout_seconds", defaults.focus_command_timeout_seconds)
        if isinstance(timeout, str):
            try:
                timeout = float(timeout)
            except ValueError:
                pass
        timeout = self._checked(
            "focus_command_timeout_seconds",
            timeout,
            ConfigValidator.check_timeout(timeout),
            defaults.focus_command_timeout_seconds,
        )

        commands = {}
        for name in ConfigValidator.COMMAND_LIST_FIELDS:
            value = data.get(name)
            if value is None:
                value = []
            commands[name] = list(self._checked(
                name,
                value,
                ConfigValidator.check_commands(name, value),
                getattr(defaults, name),
            ))

        log_level = data.get("log_level", defaults.log_level)
        log_level = self._checked(
            "log_level",
            log_level,
            ConfigValidator.check_log_level(log_level),
            defaults.log_level,
        ).upper()

        return Settings(
            focus_command_timeout_seconds=float(timeout),
            log_level=log_level,
            **commands,
        )

    def _checked(self, name: str, value: Any, error: Optional[str], default: Any) -> Any:
        if error is None:
            return value
        logger.warning(f"Invalid {name} in {self.config_file}: {error}; using default {default!r}")
        return default
