"""
Text Editor Destination

Inserts content at the cursor of a bound document. Binding requires a split
layout (two or more editor groups) so the destination can be written to
while the user keeps working in another group. Delivery is validated lazily:
the document must be the active tab of its group at paste time, otherwise
the paste fails and the binding is kept.
"""

import logging
from pathlib import PurePosixPath
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from ..host import EditorHandle, Workbench
from ..utils.text import apply_smart_padding, is_eligible_for_paste
from .base import BindFailureReason, DestinationKind, PasteDestination

logger = logging.getLogger(__name__)


class TextEditorDestination(PasteDestination):
    """Text editor paste destination."""

    kind = DestinationKind.TEXT_EDITOR

    WRITABLE_SCHEMES = frozenset({"file", "untitled"})

    BINARY_EXTENSIONS = frozenset({
        ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".svg",
        ".pdf", ".zip", ".tar", ".gz", ".7z", ".rar",
        ".exe", ".dll", ".bin", ".dat", ".db", ".sqlite",
    })

    def __init__(self, editor: Optional[EditorHandle], workbench: Workbench):
        """
        Initialize the text editor destination.

        Args:
            editor: Document to deliver to (None if no editor was active)
            workbench: Host services for layout queries and insertion
        """
        self.editor = editor
        self.workbench = workbench

    @property
    def display_name(self) -> str:
        if self.editor is None:
            return "Text Editor"
        return f'Text Editor ("{self.editor.display_name}")'

    @property
    def resource(self) -> Optional[EditorHandle]:
        return self.editor

    @property
    def document_uri(self) -> Optional[str]:
        return self.editor.uri if self.editor else None

    async def is_available(self) -> bool:
        return self._check_bindable() is None

    async def unavailable_reason(self) -> BindFailureReason:
        return self._check_bindable() or BindFailureReason.NOT_DETECTED

    def _check_bindable(self) -> Optional[BindFailureReason]:
        if self.editor is None:
            return BindFailureReason.NO_RESOURCE

        parsed = urlparse(self.editor.uri)
        if parsed.scheme not in self.WRITABLE_SCHEMES:
            return BindFailureReason.EDITOR_READ_ONLY
        if PurePosixPath(parsed.path).suffix.lower() in self.BINARY_EXTENSIONS:
            return BindFailureReason.EDITOR_BINARY_FILE

        # Needs a second group besides the one being worked in
        if self.workbench.tab_group_count() < 2:
            return BindFailureReason.EDITOR_REQUIRES_SPLIT

        return None

    def is_self_delivery(self, source_uri: Optional[str]) -> bool:
        if source_uri is None or self.editor is None:
            return False
        return source_uri == self.editor.uri

    async def is_eligible_for_paste_link(self, link: str, source_uri: Optional[str] = None) -> bool:
        return self._check_self_paste(source_uri, "creating link from bound editor")

    async def is_eligible_for_paste_content(self, text: str, source_uri: Optional[str] = None) -> bool:
        return self._check_self_paste(source_uri, "selecting text from bound editor")

    def _check_self_paste(self, source_uri: Optional[str], action: str) -> bool:
        if self.is_self_delivery(source_uri):
            logger.debug(f"Self-paste detected, skipping auto-paste ({action}): {source_uri}")
            return False
        return True

    async def paste_link(self, link: str) -> bool:
        return await self._insert(link, "link")

    async def paste_content(self, text: str) -> bool:
        return await self._insert(text, "content")

    async def _insert(self, text: str, content_type: str) -> bool:
        if not is_eligible_for_paste(text):
            logger.info(f"Text editor {content_type} not eligible for paste (empty or whitespace-only)")
            return False

        if self.editor is None:
            logger.warning(f"Cannot paste {content_type}: no text editor bound")
            return False

        uri = self.editor.uri
        if not self.workbench.is_document_topmost(uri):
            logger.warning(f"Bound document is not topmost in its tab group: {self.editor.display_name}")
            return False

        padded = apply_smart_padding(text)
        try:
            inserted = await self.workbench.insert_text(uri, padded)
        except Exception as e:
            logger.error(f"Failed to paste {content_type} to {self.editor.display_name}: {e}")
            return False

        if not inserted:
            logger.error(f"Edit operation rejected for {self.editor.display_name}")
            return False

        await self._show(uri)
        logger.info(
            f"Pasted {content_type} to text editor {self.editor.display_name!r} "
            f"({len(text)} -> {len(padded)} chars)"
        )
        return True

    async def focus(self) -> bool:
        if self.editor is None:
            logger.warning("Cannot focus: no text editor bound")
            return False
        return await self._show(self.editor.uri)

    async def _show(self, uri: str) -> bool:
        try:
            return await self.workbench.show_document(uri)
        except Exception as e:
            logger.warning(f"Failed to reveal {self.editor.display_name}: {e}")
            return False

    async def equals(self, other: Optional[PasteDestination]) -> bool:
        """Compare editors by document URI."""
        if not isinstance(other, TextEditorDestination):
            return False
        if self.editor is None or other.editor is None:
            return False
        return self.editor.uri == other.editor.uri

    def get_focus_success_message(self) -> str:
        name = self.editor.display_name if self.editor else "Text Editor"
        return f'Focused Editor: "{name}"'

    def get_logging_details(self) -> Dict[str, Any]:
        return {
            "editor_name": self.editor.display_name if self.editor else None,
            "editor_uri": self.document_uri,
        }
