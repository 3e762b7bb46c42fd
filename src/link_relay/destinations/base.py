"""
Base Destination Abstraction for Link Relay

Provides the abstract contract every paste destination implements and the
typed bind requests used to create them. Destinations fall into two groups:

1. Resource-bound destinations (terminal, text editor)
   - Wrap a live host resource passed in at bind time
   - Deliver content automatically
   - Lose their binding when the resource closes

2. Chat destinations (Cursor AI, Claude Code)
   - No resource, one instance per kind
   - Cannot insert text programmatically; the user pastes from the clipboard
   - Immune to resource-closure events

Every capability is declared here so the binding manager never needs to
check for kind-specific methods.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..host import EditorHandle, TerminalHandle


class DestinationKind(Enum):
    """
    Closed set of destination kinds.

    - TERMINAL: Integrated terminal
    - TEXT_EDITOR: Text document in a split editor group
    - CURSOR_AI: Cursor IDE chat panel
    - CLAUDE_CODE: Claude Code chat panel
    - GITHUB_COPILOT_CHAT: Declared but not implemented
    """

    TERMINAL = "terminal"
    TEXT_EDITOR = "text-editor"
    CURSOR_AI = "cursor-ai"
    CLAUDE_CODE = "claude-code"
    GITHUB_COPILOT_CHAT = "github-copilot-chat"

    @property
    def is_resource_bound(self) -> bool:
        """True for kinds that wrap a host resource."""
        return self in (DestinationKind.TERMINAL, DestinationKind.TEXT_EDITOR)

    @property
    def is_chat(self) -> bool:
        """True for chat panel kinds."""
        return not self.is_resource_bound


class BindFailureReason(Enum):
    """Why a destination could not be bound."""

    NO_RESOURCE = "no-resource"
    NOT_DETECTED = "not-detected"
    EDITOR_REQUIRES_SPLIT = "editor-requires-split"
    EDITOR_READ_ONLY = "editor-read-only"
    EDITOR_BINARY_FILE = "editor-binary-file"


@dataclass(frozen=True)
class TerminalBindOptions:
    """Bind request for a terminal; terminal is None when no terminal is active."""
    terminal: Optional[TerminalHandle]

    @property
    def kind(self) -> DestinationKind:
        return DestinationKind.TERMINAL


@dataclass(frozen=True)
class TextEditorBindOptions:
    """Bind request for a text editor; editor is None when no editor is active."""
    editor: Optional[EditorHandle]

    @property
    def kind(self) -> DestinationKind:
        return DestinationKind.TEXT_EDITOR


@dataclass(frozen=True)
class ChatBindOptions:
    """Bind request for a chat destination (no resource)."""
    chat_kind: DestinationKind

    def __post_init__(self) -> None:
        if not self.chat_kind.is_chat:
            raise ValueError(f"Not a chat destination kind: {self.chat_kind.value}")

    @property
    def kind(self) -> DestinationKind:
        return self.chat_kind


BindOptions = Union[TerminalBindOptions, TextEditorBindOptions, ChatBindOptions]


class PasteDestination(ABC):
    """
    Abstract base class for paste destinations.

    Subclasses must implement:
    - is_available(): Whether this destination can currently be bound
    - is_eligible_for_paste_link() / is_eligible_for_paste_content(): Admission checks
    - paste_link() / paste_content(): Delivery attempts
    - focus(): Bring the destination into view
    - equals(): Identity comparison

    Optional overrides:
    - is_self_delivery(): Self-paste detection (default: never)
    - get_user_instruction(): Manual-paste guidance (default: none)
    - get_logging_details(): Diagnostic key/value bag
    - resource: The host resource whose closure ends the binding
    """

    kind: DestinationKind

    @property
    def id(self) -> DestinationKind:
        """Destination kind identifier."""
        return self.kind

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable label used in status messages."""

    @property
    def resource(self) -> Optional[Any]:
        """Resource handle tracked for closure detection (None for chat kinds)."""
        return None

    @abstractmethod
    async def is_available(self) -> bool:
        """Check whether this destination can currently be bound."""

    async def unavailable_reason(self) -> BindFailureReason:
        """Explain why is_available() returned False."""
        return BindFailureReason.NOT_DETECTED

    def is_self_delivery(self, source_uri: Optional[str]) -> bool:
        """
        Check whether delivering content from source_uri would paste it back
        into the place it came from.

        Args:
            source_uri: URI of the document the content originated in, if known

        Returns:
            True if the source is this destination's own resource
        """
        return False

    @abstractmethod
    async def is_eligible_for_paste_link(self, link: str, source_uri: Optional[str] = None) -> bool:
        """Decide whether a generated link should be auto-delivered here."""

    @abstractmethod
    async def is_eligible_for_paste_content(self, text: str, source_uri: Optional[str] = None) -> bool:
        """Decide whether selected text should be auto-delivered here."""

    @abstractmethod
    async def paste_link(self, link: str) -> bool:
        """
        Deliver a generated link.

        Returns:
            True if delivery succeeded, False otherwise (never raises)
        """

    @abstractmethod
    async def paste_content(self, text: str) -> bool:
        """
        Deliver raw text content.

        Returns:
            True if delivery succeeded, False otherwise (never raises)
        """

    @abstractmethod
    async def focus(self) -> bool:
        """Bring the destination into view without delivering content."""

    @abstractmethod
    async def equals(self, other: Optional["PasteDestination"]) -> bool:
        """Compare destinations by underlying resource identity."""

    def get_user_instruction(self) -> Optional[str]:
        """Manual-paste guidance, present only for destinations that cannot auto-insert."""
        return None

    def get_focus_success_message(self) -> str:
        """Status message shown after a successful focus."""
        return f"Focused {self.display_name}"

    def get_logging_details(self) -> Dict[str, Any]:
        """Get destination-specific details for logging."""
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.display_name!r})"
