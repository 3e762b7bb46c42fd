"""Tests for TextEditorDestination."""

import pytest

from conftest import FakeEditor
from link_relay.destinations.base import BindFailureReason, DestinationKind
from link_relay.destinations.text_editor import TextEditorDestination


class TestTextEditorBindValidation:
    """Tests for text editor availability checks."""

    @pytest.mark.asyncio
    async def test_available_in_split_layout(self, editor, workbench):
        """Test that a writable text document in a split layout can be bound."""
        destination = TextEditorDestination(editor, workbench)

        assert destination.id == DestinationKind.TEXT_EDITOR
        assert destination.display_name == 'Text Editor ("src/a.py")'
        assert await destination.is_available() is True

    @pytest.mark.asyncio
    async def test_missing_editor(self, workbench):
        """Test that no active editor reports a missing resource."""
        destination = TextEditorDestination(None, workbench)

        assert await destination.is_available() is False
        assert await destination.unavailable_reason() == BindFailureReason.NO_RESOURCE

    @pytest.mark.asyncio
    async def test_single_group_requires_split(self, editor, workbench):
        """Test that a single editor group is rejected."""
        workbench.group_count = 1
        destination = TextEditorDestination(editor, workbench)

        assert await destination.is_available() is False
        assert await destination.unavailable_reason() == BindFailureReason.EDITOR_REQUIRES_SPLIT

    @pytest.mark.asyncio
    async def test_read_only_scheme(self, workbench):
        """Test that documents outside writable schemes are rejected."""
        destination = TextEditorDestination(FakeEditor("git:///repo/src/a.py", "a.py (git)"), workbench)

        assert await destination.unavailable_reason() == BindFailureReason.EDITOR_READ_ONLY

    @pytest.mark.asyncio
    async def test_untitled_is_writable(self, workbench):
        """Test that untitled documents can be bound."""
        destination = TextEditorDestination(FakeEditor("untitled:Untitled-1", "Untitled-1"), workbench)

        assert await destination.is_available() is True

    @pytest.mark.asyncio
    async def test_binary_file(self, workbench):
        """Test that binary files are rejected."""
        destination = TextEditorDestination(FakeEditor("file:///repo/logo.PNG", "logo.PNG"), workbench)

        assert await destination.unavailable_reason() == BindFailureReason.EDITOR_BINARY_FILE


class TestTextEditorSelfPaste:
    """Tests for self-paste avoidance."""

    @pytest.mark.asyncio
    async def test_content_from_bound_document_is_ineligible(self, editor, workbench):
        """Test that content originating in the bound document is not pasted back."""
        destination = TextEditorDestination(editor, workbench)

        assert destination.is_self_delivery(editor.uri) is True
        assert await destination.is_eligible_for_paste_link("l", editor.uri) is False
        assert await destination.is_eligible_for_paste_content("t", editor.uri) is False

    @pytest.mark.asyncio
    async def test_content_from_other_document_is_eligible(self, editor, workbench):
        """Test that content from another document is accepted."""
        destination = TextEditorDestination(editor, workbench)

        assert await destination.is_eligible_for_paste_link("l", "file:///repo/src/b.py") is True
        assert await destination.is_eligible_for_paste_content("t", None) is True


class TestTextEditorPaste:
    """Tests for text editor delivery."""

    @pytest.mark.asyncio
    async def test_paste_inserts_padded_text(self, editor, workbench):
        """Test that pasted text is padded, inserted and the document revealed."""
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_link("src/b.ts#L3") is True
        assert workbench.inserted == [(editor.uri, " src/b.ts#L3 ")]
        assert workbench.shown == [editor.uri]

    @pytest.mark.asyncio
    async def test_paste_fails_when_not_topmost(self, editor, workbench):
        """Test that a hidden document is not written to."""
        workbench.topmost = False
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_content("text") is False
        assert workbench.inserted == []

    @pytest.mark.asyncio
    async def test_paste_fails_when_edit_rejected(self, editor, workbench):
        """Test that a rejected edit reports failure."""
        workbench.insert_result = False
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_content("text") is False
        assert workbench.shown == []

    @pytest.mark.asyncio
    async def test_paste_fails_when_insert_raises(self, editor, workbench):
        """Test that host exceptions during insertion become a failed paste."""
        async def boom(uri, text):
            raise RuntimeError("document disposed")

        workbench.insert_text = boom
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_content("text") is False

    @pytest.mark.asyncio
    async def test_paste_blank_text_fails(self, editor, workbench):
        """Test that whitespace-only text is not inserted."""
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_content(" \n ") is False
        assert workbench.inserted == []

    @pytest.mark.asyncio
    async def test_reveal_failure_after_insert_still_delivered(self, editor, workbench):
        """Test that a host error while revealing the document does not escape the paste."""
        workbench.show_error = RuntimeError("editor group closed")
        destination = TextEditorDestination(editor, workbench)

        assert await destination.paste_link("src/b.ts#L3") is True
        assert workbench.inserted == [(editor.uri, " src/b.ts#L3 ")]


class TestTextEditorEquality:
    """Tests for editor equality and focus."""

    @pytest.mark.asyncio
    async def test_equal_by_uri(self, workbench):
        """Test that editors compare by document URI."""
        first = TextEditorDestination(FakeEditor("file:///a.py", "a.py"), workbench)
        same = TextEditorDestination(FakeEditor("file:///a.py", "other name"), workbench)
        other = TextEditorDestination(FakeEditor("file:///b.py", "b.py"), workbench)

        assert await first.equals(same) is True
        assert await first.equals(other) is False
        assert await first.equals(None) is False

    @pytest.mark.asyncio
    async def test_focus_reveals_document(self, editor, workbench):
        """Test that focus shows the bound document."""
        destination = TextEditorDestination(editor, workbench)

        assert await destination.focus() is True
        assert workbench.shown == [editor.uri]
        assert destination.get_focus_success_message() == 'Focused Editor: "src/a.py"'

    @pytest.mark.asyncio
    async def test_focus_reveal_error(self, editor, workbench):
        """Test that a host error while focusing becomes a failed focus."""
        workbench.show_error = RuntimeError("editor group closed")
        destination = TextEditorDestination(editor, workbench)

        assert await destination.focus() is False
