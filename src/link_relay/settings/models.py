"""
Settings data models for Link Relay.

This module defines the configuration consumed by the binding core:
- focus command timeout applied to every chat "open panel" command
- per-assistant focus command overrides
- log level used by the CLI
"""

from dataclasses import dataclass, field
from typing import List, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Global settings for Link Relay.

    Attributes:
        focus_command_timeout_seconds: Seconds to wait for each chat focus
            command before falling through to the next one.
        cursor_ai_focus_commands: Ordered commands that open the Cursor chat
            panel. Empty means the built-in order.
        claude_code_focus_commands: Ordered commands that open the Claude Code
            panel. Empty means the built-in order.
        log_level: Logging level name used by the CLI.
    """

    focus_command_timeout_seconds: float = 5.0
    cursor_ai_focus_commands: List[str] = field(default_factory=list)
    claude_code_focus_commands: List[str] = field(default_factory=list)
    log_level: str = "WARNING"

    def get_focus_commands(self, kind: str) -> Optional[List[str]]:
        """
        Return the configured focus commands for a chat kind.

        Args:
            kind: Destination kind value, e.g. "cursor-ai"

        Returns:
            The override list, or None to use the destination's defaults
        """
        overrides = {
            "cursor-ai": self.cursor_ai_focus_commands,
            "claude-code": self.claude_code_focus_commands,
        }
        commands = overrides.get(kind)
        return list(commands) if commands else None
