"""
Binding and delivery outcomes.

The binding manager never shows messages itself. Every public operation
returns a classified result and the caller owns the user-facing wording.
Failure guidance for deliveries is the exception: it is fixed per
destination kind and travels with the result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..destinations.base import BindFailureReason, DestinationKind
from ..errors import LinkRelayError


class BindOutcome(Enum):
    """Classified result of bind/unbind operations and binding notifications."""
    BOUND = "bound"
    REPLACED = "replaced"
    ALREADY_BOUND = "already-bound"
    CONFLICT_DECLINED = "conflict-declined"
    PREREQUISITE_MISSING = "prerequisite-missing"
    DESTINATION_UNAVAILABLE = "destination-unavailable"
    UNBOUND = "unbound"
    NOTHING_BOUND = "nothing-bound"
    REMOVED_BY_CLOSURE = "removed-by-closure"


class SendOutcome(Enum):
    """Classified result of a send operation."""
    CLIPBOARD_ONLY = "clipboard-only"
    AUTO_DELIVERED = "auto-delivered"
    MANUAL_INSTRUCTION = "manual-instruction"
    FAILED_WITH_GUIDANCE = "failed-with-guidance"


class FocusOutcome(Enum):
    """Classified result of a focus operation."""
    FOCUSED = "focused"
    FOCUS_FAILED = "focus-failed"
    NOT_BOUND = "not-bound"


FAILURE_GUIDANCE: Dict[DestinationKind, str] = {
    DestinationKind.TERMINAL: (
        "Could not send to the terminal. It may be closed or not accepting input."
    ),
    DestinationKind.TEXT_EDITOR: (
        "Could not paste into the bound editor. It is hidden behind other tabs; "
        "bring it forward to resume."
    ),
    DestinationKind.CURSOR_AI: (
        "Could not open Cursor AI Assistant. Try opening it manually and paste."
    ),
    DestinationKind.CLAUDE_CODE: (
        "Could not open Claude Code Chat. Try opening it manually and paste."
    ),
    DestinationKind.GITHUB_COPILOT_CHAT: (
        "Could not open GitHub Copilot Chat. Try opening it manually and paste."
    ),
}


@dataclass
class BindResult:
    """
    Result of bind() or unbind().

    Truthy when the operation changed the binding as requested.

    Attributes:
        outcome: Classified outcome
        destination_name: Display name of the destination concerned
        destination_kind: Kind of the destination concerned
        previous_name: Display name of the replaced destination (REPLACED only)
        reason: Why binding failed (PREREQUISITE_MISSING / DESTINATION_UNAVAILABLE)
        error: Error describing a failed bind
    """
    outcome: BindOutcome
    destination_name: str = ""
    destination_kind: Optional[DestinationKind] = None
    previous_name: Optional[str] = None
    reason: Optional[BindFailureReason] = None
    error: Optional[LinkRelayError] = None

    @property
    def success(self) -> bool:
        return self.outcome in (BindOutcome.BOUND, BindOutcome.REPLACED, BindOutcome.UNBOUND)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "outcome": self.outcome.value,
            "success": self.success,
            "destination_name": self.destination_name,
            "destination_kind": self.destination_kind.value if self.destination_kind else None,
            "previous_name": self.previous_name,
            "reason": self.reason.value if self.reason else None,
            "error": self.error.to_dict() if self.error else None,
        }


# Notifications carry the same shape as bind results
BindingChange = BindResult


@dataclass
class SendResult:
    """
    Result of sending a link or text.

    The content is always on the clipboard regardless of outcome.

    Attributes:
        outcome: Classified outcome
        destination_name: Display name of the bound destination, if consulted
        destination_kind: Kind of the bound destination, if consulted
        instruction: Manual paste instruction (MANUAL_INSTRUCTION only)
        guidance: Failure guidance (FAILED_WITH_GUIDANCE only)
        error: Delivery error (FAILED_WITH_GUIDANCE only)
    """
    outcome: SendOutcome
    destination_name: Optional[str] = None
    destination_kind: Optional[DestinationKind] = None
    instruction: Optional[str] = None
    guidance: Optional[str] = None
    error: Optional[LinkRelayError] = None

    @property
    def delivered(self) -> bool:
        return self.outcome in (SendOutcome.AUTO_DELIVERED, SendOutcome.MANUAL_INSTRUCTION)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "outcome": self.outcome.value,
            "delivered": self.delivered,
            "destination_name": self.destination_name,
            "destination_kind": self.destination_kind.value if self.destination_kind else None,
            "instruction": self.instruction,
            "guidance": self.guidance,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class FocusResult:
    """Result of focusing the bound destination."""
    outcome: FocusOutcome
    destination_name: Optional[str] = None
    destination_kind: Optional[DestinationKind] = None
    message: Optional[str] = None
    error: Optional[LinkRelayError] = None

    @property
    def success(self) -> bool:
        return self.outcome == FocusOutcome.FOCUSED

    def __bool__(self) -> bool:
        return self.success
