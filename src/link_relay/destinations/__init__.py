"""
Link Relay Destinations Module

Contains the paste destination abstraction and its implementations.

Key Components:
- PasteDestination: Abstract base class for all destinations
- TerminalDestination, TextEditorDestination: Resource-bound destinations
- CursorAIDestination, ClaudeCodeDestination: Chat panel destinations
- DestinationFactory: Destination instantiation factory
"""

from .base import (
    BindFailureReason,
    BindOptions,
    ChatBindOptions,
    DestinationKind,
    PasteDestination,
    TerminalBindOptions,
    TextEditorBindOptions,
)
from .chat import ChatAssistantDestination, ClaudeCodeDestination, CursorAIDestination
from .detection import DetectionMethod, DetectionProfile, DetectionResult, EnvironmentDetector
from .factory import DestinationFactory
from .terminal import TerminalDestination
from .text_editor import TextEditorDestination

__all__ = [
    # Base classes
    "PasteDestination",
    "DestinationKind",
    "BindFailureReason",
    "BindOptions",
    "TerminalBindOptions",
    "TextEditorBindOptions",
    "ChatBindOptions",
    # Factory
    "DestinationFactory",
    # Detection
    "DetectionMethod",
    "DetectionProfile",
    "DetectionResult",
    "EnvironmentDetector",
    # Implementations
    "TerminalDestination",
    "TextEditorDestination",
    "ChatAssistantDestination",
    "CursorAIDestination",
    "ClaudeCodeDestination",
]
