"""
Destination Factory

Creates destination instances from typed bind requests. Each call returns a
fresh instance; unimplemented kinds fail at construction time so a half-built
destination never reaches the binding manager.
"""

import logging
from typing import Dict, List, Optional, Type

from ..errors import DestinationNotImplementedError
from ..host import Workbench
from ..settings.models import Settings
from ..settings.validation import ConfigValidator
from .base import (
    BindOptions,
    ChatBindOptions,
    DestinationKind,
    PasteDestination,
    TerminalBindOptions,
    TextEditorBindOptions,
)
from .chat import ChatAssistantDestination, ClaudeCodeDestination, CursorAIDestination
from .detection import DetectionProfile
from .terminal import TerminalDestination
from .text_editor import TextEditorDestination

logger = logging.getLogger(__name__)


# Type alias for chat destination classes
ChatDestinationClass = Type[ChatAssistantDestination]


class DestinationFactory:
    """
    Factory for creating destination instances.

    Supports:
    - terminal: requires a terminal handle
    - text-editor: requires an editor handle
    - cursor-ai, claude-code: chat panels, no resource

    Example:
        factory = DestinationFactory(workbench)
        destination = factory.create(TerminalBindOptions(terminal))
        destination = factory.create(ChatBindOptions(DestinationKind.CURSOR_AI))
    """

    _chat_destinations: Dict[DestinationKind, ChatDestinationClass] = {
        DestinationKind.CURSOR_AI: CursorAIDestination,
        DestinationKind.CLAUDE_CODE: ClaudeCodeDestination,
    }

    _display_names: Dict[DestinationKind, str] = {
        DestinationKind.TERMINAL: "Terminal",
        DestinationKind.TEXT_EDITOR: "Text Editor",
        DestinationKind.CURSOR_AI: "Cursor AI Assistant",
        DestinationKind.CLAUDE_CODE: "Claude Code Chat",
        DestinationKind.GITHUB_COPILOT_CHAT: "GitHub Copilot Chat",
    }

    def __init__(self, workbench: Workbench, settings: Optional[Settings] = None):
        """
        Initialize the factory.

        Args:
            workbench: Host services injected into editor and chat destinations
            settings: Focus command overrides and timeouts (defaults if None)

        Raises:
            ValueError: If settings fail validation
        """
        settings = settings or Settings()
        validation = ConfigValidator.validate(settings)
        if not validation.valid:
            raise ValueError(f"Invalid settings: {'; '.join(validation.errors)}")

        self.workbench = workbench
        self.settings = settings

    def create(self, options: BindOptions) -> PasteDestination:
        """
        Create a destination for a bind request.

        Args:
            options: Typed bind request

        Returns:
            New destination instance

        Raises:
            DestinationNotImplementedError: If the kind has no implementation
        """
        kind = options.kind
        logger.debug(f"Creating destination: {kind.value}")

        if isinstance(options, TerminalBindOptions):
            return TerminalDestination(options.terminal)

        if isinstance(options, TextEditorBindOptions):
            return TextEditorDestination(options.editor, self.workbench)

        if isinstance(options, ChatBindOptions):
            return self._create_chat(kind)

        raise DestinationNotImplementedError(
            f"Unhandled bind options: {options!r}",
            details={"options": repr(options)},
        )

    def _create_chat(self, kind: DestinationKind) -> ChatAssistantDestination:
        destination_class = self._chat_destinations.get(kind)
        if destination_class is None:
            raise DestinationNotImplementedError(
                f"Destination kind not yet implemented: {kind.value}",
                details={"destination_kind": kind.value},
            )

        return destination_class(
            self.workbench,
            focus_commands=self.settings.get_focus_commands(kind.value),
            command_timeout=self.settings.focus_command_timeout_seconds,
        )

    def detect_available_chat_kinds(self) -> List[DestinationKind]:
        """Return the implemented chat kinds whose detection chain matches."""
        available = []
        for kind in self._chat_destinations:
            result = self._create_chat(kind).detect()
            if result.detected:
                available.append(kind)
        return available

    @classmethod
    def get_supported_kinds(cls) -> List[DestinationKind]:
        """Get destination kinds that can be created."""
        return [DestinationKind.TERMINAL, DestinationKind.TEXT_EDITOR, *cls._chat_destinations]

    @classmethod
    def is_implemented(cls, kind: DestinationKind) -> bool:
        return kind in cls.get_supported_kinds()

    @classmethod
    def get_chat_profiles(cls) -> Dict[DestinationKind, DetectionProfile]:
        """Map each implemented chat kind to its detection profile."""
        return {kind: destination_class.PROFILE for kind, destination_class in cls._chat_destinations.items()}

    @classmethod
    def get_display_names(cls) -> Dict[DestinationKind, str]:
        """Map every declared kind to its user-facing name."""
        return dict(cls._display_names)
