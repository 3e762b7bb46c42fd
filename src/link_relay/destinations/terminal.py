"""
Terminal Destination

Delivers content to a bound terminal with smart padding. Text is written
without a trailing newline so nothing is executed, then the terminal panel
is brought into view.
"""

import logging
from typing import Any, Dict, Optional

from ..host import TerminalHandle
from ..utils.text import apply_smart_padding, is_eligible_for_paste
from .base import BindFailureReason, DestinationKind, PasteDestination

logger = logging.getLogger(__name__)


class TerminalDestination(PasteDestination):
    """
    Terminal paste destination.

    Example:
        destination = TerminalDestination(terminal)
        await destination.paste_link("src/a.ts#L10")  # sends " src/a.ts#L10 "
    """

    kind = DestinationKind.TERMINAL

    def __init__(self, terminal: Optional[TerminalHandle] = None):
        """
        Initialize the terminal destination.

        Args:
            terminal: Terminal to deliver to (None if no terminal was active)
        """
        self.terminal = terminal

    @property
    def display_name(self) -> str:
        if self.terminal is None:
            return "Terminal"
        return f'Terminal ("{self.terminal.name}")'

    @property
    def resource(self) -> Optional[TerminalHandle]:
        return self.terminal

    async def is_available(self) -> bool:
        return self.terminal is not None

    async def unavailable_reason(self) -> BindFailureReason:
        return BindFailureReason.NO_RESOURCE

    async def is_eligible_for_paste_link(self, link: str, source_uri: Optional[str] = None) -> bool:
        return True

    async def is_eligible_for_paste_content(self, text: str, source_uri: Optional[str] = None) -> bool:
        return True

    async def paste_link(self, link: str) -> bool:
        return self._send(link, "link")

    async def paste_content(self, text: str) -> bool:
        return self._send(text, "content")

    def _send(self, text: str, content_type: str) -> bool:
        if not is_eligible_for_paste(text):
            logger.info(f"Terminal {content_type} not eligible for paste (empty or whitespace-only)")
            return False

        if self.terminal is None:
            logger.warning(f"Cannot paste {content_type}: no terminal bound")
            return False

        padded = apply_smart_padding(text)
        self.terminal.send_text(padded, add_new_line=False)
        self.terminal.show(preserve_focus=False)

        logger.info(
            f"Pasted {content_type} to terminal {self.terminal.name!r} "
            f"({len(text)} -> {len(padded)} chars)"
        )
        return True

    async def focus(self) -> bool:
        if self.terminal is None:
            logger.warning("Cannot focus: no terminal bound")
            return False
        self.terminal.show(preserve_focus=False)
        return True

    async def equals(self, other: Optional[PasteDestination]) -> bool:
        """
        Compare terminals by resolved process id.

        Returns False when either side has no terminal or either process id
        cannot be resolved.
        """
        if not isinstance(other, TerminalDestination):
            return False
        if self.terminal is None or other.terminal is None:
            return False

        this_pid = await self.terminal.process_id()
        other_pid = await other.terminal.process_id()
        return this_pid is not None and this_pid == other_pid

    def get_focus_success_message(self) -> str:
        name = self.terminal.name if self.terminal else "Terminal"
        return f'Focused Terminal: "{name}"'

    def get_logging_details(self) -> Dict[str, Any]:
        return {"terminal_name": self.terminal.name if self.terminal else None}
