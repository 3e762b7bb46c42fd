"""
Chat Assistant Destinations

Chat panels cannot receive text programmatically. Delivery therefore opens
or focuses the panel and leaves the actual paste to the user, who already
has the content on the clipboard. A delivery is reported as successful once
any open command succeeds or once every command has been tried; the manual
instruction returned by get_user_instruction() tells the caller to show a
"paste manually" message instead of "sent".
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from ..host import Workbench
from .base import DestinationKind, PasteDestination
from .detection import (
    CLAUDE_CODE_PROFILE,
    CURSOR_AI_PROFILE,
    DetectionProfile,
    DetectionResult,
    EnvironmentDetector,
)

logger = logging.getLogger(__name__)

DEFAULT_FOCUS_COMMAND_TIMEOUT = 5.0


class ChatAssistantDestination(PasteDestination):
    """
    Base class for chat panel destinations.

    Subclasses provide:
    - PROFILE: Detection profile for the three-tier availability check
    - FOCUS_COMMANDS: Host commands that open the panel, in order of preference
    - DISPLAY_NAME: Label shown to the user
    - USER_INSTRUCTION: Manual paste instruction
    """

    PROFILE: DetectionProfile
    FOCUS_COMMANDS: Sequence[str] = ()
    DISPLAY_NAME: str = ""
    USER_INSTRUCTION: str = ""

    def __init__(
        self,
        workbench: Workbench,
        focus_commands: Optional[Sequence[str]] = None,
        command_timeout: float = DEFAULT_FOCUS_COMMAND_TIMEOUT,
    ):
        """
        Initialize the chat destination.

        Args:
            workbench: Host services used for detection and command dispatch
            focus_commands: Override for the ordered open/focus commands
            command_timeout: Seconds to wait for each command before moving on
        """
        self.workbench = workbench
        self.focus_commands: List[str] = list(focus_commands or self.FOCUS_COMMANDS)
        self.command_timeout = command_timeout

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME

    def detect(self) -> DetectionResult:
        """Run the detection chain against the current host environment."""
        return EnvironmentDetector(self.workbench.environment).detect(self.PROFILE)

    async def is_available(self) -> bool:
        result = self.detect()
        if result.detected:
            logger.debug(f"{self.display_name} detected via {result.method.value}")
        return result.detected

    async def is_eligible_for_paste_link(self, link: str, source_uri: Optional[str] = None) -> bool:
        return True

    async def is_eligible_for_paste_content(self, text: str, source_uri: Optional[str] = None) -> bool:
        return True

    async def paste_link(self, link: str) -> bool:
        logger.debug(f"Opening {self.display_name} for link ({len(link)} chars)")
        await self._open_chat()
        return True

    async def paste_content(self, text: str) -> bool:
        logger.debug(f"Opening {self.display_name} for content ({len(text)} chars)")
        await self._open_chat()
        return True

    async def focus(self) -> bool:
        return await self._open_chat()

    async def _open_chat(self) -> bool:
        """
        Try each focus command in order until one succeeds.

        Returns:
            True if a command succeeded, False if all of them failed
        """
        for command in self.focus_commands:
            try:
                await asyncio.wait_for(
                    self.workbench.execute_command(command),
                    timeout=self.command_timeout,
                )
            except asyncio.TimeoutError:
                logger.debug(f"Command {command} timed out after {self.command_timeout}s, trying next")
                continue
            except Exception as e:
                logger.debug(f"Command {command} failed ({e}), trying next")
                continue

            logger.debug(f"Opened {self.display_name} with {command}")
            return True

        logger.warning(f"All {self.display_name} open commands failed")
        return False

    async def equals(self, other: Optional[PasteDestination]) -> bool:
        if other is None:
            return False
        return self.kind == other.kind

    def get_user_instruction(self) -> Optional[str]:
        return self.USER_INSTRUCTION

    def get_focus_success_message(self) -> str:
        return f"Focused {self.display_name}"


class CursorAIDestination(ChatAssistantDestination):
    """Cursor IDE built-in AI chat."""

    kind = DestinationKind.CURSOR_AI
    PROFILE = CURSOR_AI_PROFILE
    DISPLAY_NAME = "Cursor AI Assistant"
    FOCUS_COMMANDS = (
        "aichat.newchataction",
        "workbench.action.toggleAuxiliaryBar",
    )
    USER_INSTRUCTION = "Paste (Cmd/Ctrl+V) in Cursor chat to use."


class ClaudeCodeDestination(ChatAssistantDestination):
    """Claude Code extension chat panel."""

    kind = DestinationKind.CLAUDE_CODE
    PROFILE = CLAUDE_CODE_PROFILE
    DISPLAY_NAME = "Claude Code Chat"
    FOCUS_COMMANDS = (
        "claude-vscode.focus",
        "claude-vscode.sidebar.open",
        "claude-vscode.editor.open",
    )
    USER_INSTRUCTION = "Paste (Cmd/Ctrl+V) in Claude Code chat to use."
