"""
Host capability ports.

The binding core never talks to a concrete editor, terminal emulator or
clipboard. Everything it needs from the host is injected through these
abstract ports, so the manager and destinations can be driven by real
adapters or by test doubles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional


class Disposable(ABC):
    """Handle returned by event subscriptions."""

    @abstractmethod
    def dispose(self) -> None:
        """Stop delivering events to the subscribed listener."""


class TerminalHandle(ABC):
    """A live terminal owned by the host."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Terminal name as shown by the host."""

    @abstractmethod
    async def process_id(self) -> Optional[int]:
        """Resolve the shell process id, or None if it cannot be resolved."""

    @abstractmethod
    def send_text(self, text: str, add_new_line: bool = False) -> None:
        """Write text to the terminal input."""

    @abstractmethod
    def show(self, preserve_focus: bool = False) -> None:
        """Bring the terminal panel into view."""


class EditorHandle(ABC):
    """An open text document shown in an editor."""

    @property
    @abstractmethod
    def uri(self) -> str:
        """Document URI, e.g. ``file:///repo/src/a.py``."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Workspace-relative path or untitled name."""


class Clipboard(ABC):
    """Universal fallback surface."""

    @abstractmethod
    async def write_text(self, text: str) -> None:
        """Replace clipboard contents with text."""


class ConfirmationPrompt(ABC):
    """Binary choice presented to the user."""

    @abstractmethod
    async def choose(self, placeholder: str, options: List[str]) -> Optional[str]:
        """
        Present options and wait for a selection.

        Returns:
            The chosen label, or None if the user dismissed the prompt
        """


TerminalClosedListener = Callable[[TerminalHandle], None]
DocumentClosedListener = Callable[[str], None]


class ResourceEvents(ABC):
    """Source of resource-closure notifications."""

    @abstractmethod
    def on_did_close_terminal(self, listener: TerminalClosedListener) -> Disposable:
        """Subscribe to terminal closure; the listener receives the closed handle."""

    @abstractmethod
    def on_did_close_document(self, listener: DocumentClosedListener) -> Disposable:
        """Subscribe to document closure; the listener receives the closed URI."""


@dataclass
class HostEnvironment:
    """
    Identity of the running host application.

    Attributes:
        app_name: Application name, e.g. "Visual Studio Code" or "Cursor"
        extension_ids: Identifiers of installed extensions
        uri_scheme: URI scheme registered by the application
        inactive_extension_ids: Installed extensions that are not activated
    """
    app_name: str = ""
    extension_ids: List[str] = field(default_factory=list)
    uri_scheme: str = ""
    inactive_extension_ids: List[str] = field(default_factory=list)


class Workbench(ABC):
    """
    Editor window services used by destinations.

    Groups the host calls that are not tied to a single resource: layout
    queries, text insertion into documents, command dispatch and the
    application identity used for chat detection.
    """

    @property
    @abstractmethod
    def environment(self) -> HostEnvironment:
        """Identity of the host application."""

    @abstractmethod
    def tab_group_count(self) -> int:
        """Number of visible editor groups."""

    @abstractmethod
    def is_document_topmost(self, uri: str) -> bool:
        """True if the document is the active tab of the group that holds it."""

    @abstractmethod
    async def insert_text(self, uri: str, text: str) -> bool:
        """Insert text at the cursor of the document; False if the edit was rejected."""

    @abstractmethod
    async def show_document(self, uri: str) -> bool:
        """Reveal the document in its group and give it focus."""

    @abstractmethod
    async def execute_command(self, command: str) -> None:
        """Dispatch a host command; raises if the command is unknown or fails."""
