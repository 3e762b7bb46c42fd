"""
Link Relay Binding Module

Owns the single active destination binding and the content delivery
pipeline.
"""

from .manager import BindingManager, ContentType
from .results import (
    FAILURE_GUIDANCE,
    BindingChange,
    BindOutcome,
    BindResult,
    FocusOutcome,
    FocusResult,
    SendOutcome,
    SendResult,
)

__all__ = [
    "BindingManager",
    "ContentType",
    "BindingChange",
    "BindOutcome",
    "BindResult",
    "FocusOutcome",
    "FocusResult",
    "SendOutcome",
    "SendResult",
    "FAILURE_GUIDANCE",
]
