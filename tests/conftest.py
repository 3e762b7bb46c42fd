"""Pytest configuration and fixtures for Link Relay tests."""

import asyncio
from typing import Callable, List, Optional

import pytest

from link_relay.binding.manager import BindingManager
from link_relay.destinations.factory import DestinationFactory
from link_relay.host import (
    Clipboard,
    ConfirmationPrompt,
    Disposable,
    EditorHandle,
    HostEnvironment,
    ResourceEvents,
    TerminalHandle,
    Workbench,
)
from link_relay.settings.models import Settings


class FakeTerminal(TerminalHandle):
    """Terminal double that records everything sent to it."""

    def __init__(self, name: str = "bash", pid: Optional[int] = 1234):
        self._name = name
        self.pid = pid
        self.sent: List[str] = []
        self.show_calls = 0

    @property
    def name(self) -> str:
        return self._name

    async def process_id(self) -> Optional[int]:
        return self.pid

    def send_text(self, text: str, add_new_line: bool = False) -> None:
        assert add_new_line is False
        self.sent.append(text)

    def show(self, preserve_focus: bool = False) -> None:
        self.show_calls += 1


class FakeEditor(EditorHandle):
    def __init__(self, uri: str = "file:///repo/src/a.py", display_name: str = "src/a.py"):
        self._uri = uri
        self._display_name = display_name

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def display_name(self) -> str:
        return self._display_name


class FakeWorkbench(Workbench):
    """
    Workbench double.

    Commands listed in failing_commands raise, commands listed in
    hanging_commands never complete. show_document raises show_error if set.
    """

    def __init__(self, environment: Optional[HostEnvironment] = None):
        self._environment = environment or HostEnvironment(app_name="Visual Studio Code")
        self.group_count = 2
        self.topmost = True
        self.insert_result = True
        self.inserted: List[tuple] = []
        self.shown: List[str] = []
        self.executed: List[str] = []
        self.failing_commands: set = set()
        self.hanging_commands: set = set()
        self.show_error: Optional[Exception] = None

    @property
    def environment(self) -> HostEnvironment:
        return self._environment

    def tab_group_count(self) -> int:
        return self.group_count

    def is_document_topmost(self, uri: str) -> bool:
        return self.topmost

    async def insert_text(self, uri: str, text: str) -> bool:
        self.inserted.append((uri, text))
        return self.insert_result

    async def show_document(self, uri: str) -> bool:
        self.shown.append(uri)
        if self.show_error:
            raise self.show_error
        return True

    async def execute_command(self, command: str) -> None:
        self.executed.append(command)
        if command in self.failing_commands:
            raise RuntimeError(f"command '{command}' not found")
        if command in self.hanging_commands:
            await asyncio.Event().wait()


class FakeClipboard(Clipboard):
    def __init__(self):
        self.writes: List[str] = []

    async def write_text(self, text: str) -> None:
        self.writes.append(text)


class FakePrompt(ConfirmationPrompt):
    """
    Prompt double returning a fixed answer (None simulates dismissal).

    on_choose, if set, runs while the prompt is open.
    """

    def __init__(self, answer: Optional[str] = "Yes, replace"):
        self.answer = answer
        self.calls: List[tuple] = []
        self.on_choose: Optional[Callable[[], None]] = None

    async def choose(self, placeholder: str, options: List[str]) -> Optional[str]:
        self.calls.append((placeholder, list(options)))
        if self.on_choose:
            self.on_choose()
        return self.answer


class FakeDisposable(Disposable):
    def __init__(self):
        self.dispose_count = 0

    def dispose(self) -> None:
        self.dispose_count += 1


class FakeResourceEvents(ResourceEvents):
    """Event source double; fire_* methods simulate host notifications."""

    def __init__(self):
        self.terminal_listeners = []
        self.document_listeners = []
        self.disposables: List[FakeDisposable] = []

    def on_did_close_terminal(self, listener) -> Disposable:
        self.terminal_listeners.append(listener)
        return self._track()

    def on_did_close_document(self, listener) -> Disposable:
        self.document_listeners.append(listener)
        return self._track()

    def _track(self) -> FakeDisposable:
        disposable = FakeDisposable()
        self.disposables.append(disposable)
        return disposable

    def fire_terminal_closed(self, terminal: TerminalHandle) -> None:
        for listener in self.terminal_listeners:
            listener(terminal)

    def fire_document_closed(self, uri: str) -> None:
        for listener in self.document_listeners:
            listener(uri)


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def editor():
    return FakeEditor()


@pytest.fixture
def workbench():
    return FakeWorkbench()


@pytest.fixture
def cursor_workbench():
    """Workbench running inside Cursor."""
    return FakeWorkbench(HostEnvironment(app_name="Cursor", uri_scheme="cursor"))


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def prompt():
    return FakePrompt()


@pytest.fixture
def events():
    return FakeResourceEvents()


@pytest.fixture
def changes():
    """Collects binding change notifications."""
    return []


@pytest.fixture
def settings():
    return Settings(focus_command_timeout_seconds=0.05)


@pytest.fixture
def factory(workbench, settings):
    return DestinationFactory(workbench, settings)


@pytest.fixture
def manager(factory, clipboard, prompt, events, changes):
    manager = BindingManager(factory, clipboard, prompt, events, on_binding_changed=changes.append)
    yield manager
    manager.dispose()
