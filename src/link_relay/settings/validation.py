"""
Configuration validation for Link Relay.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .models import LOG_LEVELS, Settings


@dataclass
class ValidationResult:
    """
    Outcome of checking a Settings object.

    Attributes:
        valid: False once any error has been recorded.
        errors: Problems that make the settings unusable.
        warnings: Suspicious but usable values.
    """

    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message (does not affect validity)."""
        self.warnings.append(message)


class ConfigValidator:
    """Validator for Link Relay settings."""

    # Timeouts above this get a warning
    SLOW_TIMEOUT_SECONDS = 30.0

    COMMAND_LIST_FIELDS = ("cursor_ai_focus_commands", "claude_code_focus_commands")

    @classmethod
    def validate(cls, settings: Settings) -> ValidationResult:
        result = ValidationResult()

        timeout = settings.focus_command_timeout_seconds
        error = cls.check_timeout(timeout)
        if error:
            result.add_error(error)
        elif timeout > cls.SLOW_TIMEOUT_SECONDS:
            result.add_warning(
                f"focus_command_timeout_seconds is {timeout}s; chat delivery may appear to hang"
            )

        for name in cls.COMMAND_LIST_FIELDS:
            error = cls.check_commands(name, getattr(settings, name))
            if error:
                result.add_error(error)

        error = cls.check_log_level(settings.log_level)
        if error:
            result.add_error(error)

        return result

    @staticmethod
    def check_timeout(timeout: Any) -> Optional[str]:
        """Return an error message if timeout is not a positive number."""
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            return f"focus_command_timeout_seconds must be a number, got {timeout!r}"
        if timeout <= 0:
            return f"focus_command_timeout_seconds must be positive, got {timeout}"
        return None

    @staticmethod
    def check_commands(name: str, commands: Any) -> Optional[str]:
        """Return an error message if commands is not a list of non-empty strings."""
        if not isinstance(commands, (list, tuple)):
            return f"{name} must be a list of commands, got {type(commands).__name__}"
        if any(not isinstance(command, str) or not command.strip() for command in commands):
            return f"{name} contains an empty or non-string command"
        return None

    @staticmethod
    def check_log_level(log_level: Any) -> Optional[str]:
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            return f"Unknown log_level: {log_level}. Valid levels: {', '.join(LOG_LEVELS)}"
        return None
