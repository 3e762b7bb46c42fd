"""
Link Relay - route generated code references to a bound destination

Link Relay keeps one destination bound at a time (a terminal, a text editor
in a split layout, or an AI chat panel) and routes generated links or
selected text to it. Content always lands on the clipboard first; delivery
to the destination is attempted on top of that.

Example usage:
    from link_relay import BindingManager, DestinationFactory, TerminalBindOptions

    factory = DestinationFactory(workbench)
    manager = BindingManager(factory, clipboard, prompt, events)

    await manager.bind(TerminalBindOptions(terminal))
    result = await manager.send_link_to_destination("src/a.ts#L10")
"""

__version__ = "0.1.0"

from .binding import (
    BindingManager,
    BindOutcome,
    BindResult,
    FocusOutcome,
    FocusResult,
    SendOutcome,
    SendResult,
)
from .destinations import (
    ChatBindOptions,
    DestinationFactory,
    DestinationKind,
    PasteDestination,
    TerminalBindOptions,
    TextEditorBindOptions,
)
from .errors import DestinationNotImplementedError, ErrorCode, LinkRelayError
from .settings import Settings, SettingsStorage

__all__ = [
    "__version__",
    # Binding
    "BindingManager",
    "BindOutcome",
    "BindResult",
    "FocusOutcome",
    "FocusResult",
    "SendOutcome",
    "SendResult",
    # Destinations
    "DestinationFactory",
    "DestinationKind",
    "PasteDestination",
    "TerminalBindOptions",
    "TextEditorBindOptions",
    "ChatBindOptions",
    # Errors
    "LinkRelayError",
    "ErrorCode",
    "DestinationNotImplementedError",
    # Settings
    "Settings",
    "SettingsStorage",
]
