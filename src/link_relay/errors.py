"""
Error taxonomy for Link Relay.

Every failure in the binding core is recoverable and user-facing. Only
DestinationNotImplementedError is ever raised (by the factory, before any
binding state changes); the others are attached to result objects so the
caller can decide how to present them.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Stable identifiers for binding and delivery failures."""

    PREREQUISITE_MISSING = "prerequisite-missing"
    DESTINATION_UNAVAILABLE = "destination-unavailable"
    ALREADY_BOUND = "already-bound"
    CONFLICT_DECLINED = "conflict-declined"
    DELIVERY_FAILED = "delivery-failed"
    NOT_IMPLEMENTED = "not-implemented"
    NOT_BOUND = "not-bound"
    FOCUS_FAILED = "focus-failed"


class LinkRelayError(Exception):
    """
    Base class for all Link Relay errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        details: Additional diagnostic context
    """

    code: ErrorCode = ErrorCode.DELIVERY_FAILED

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class PrerequisiteMissingError(LinkRelayError):
    """A resource-bound kind was requested without a live resource."""

    code = ErrorCode.PREREQUISITE_MISSING


class DestinationUnavailableError(LinkRelayError):
    """The destination's environment was not detected or cannot accept a binding."""

    code = ErrorCode.DESTINATION_UNAVAILABLE


class AlreadyBoundError(LinkRelayError):
    """A destination of the same kind is already bound."""

    code = ErrorCode.ALREADY_BOUND


class ConflictDeclinedError(LinkRelayError):
    """The user kept the existing binding."""

    code = ErrorCode.CONFLICT_DECLINED


class DeliveryFailedError(LinkRelayError):
    """Eligible content could not be delivered to the bound destination."""

    code = ErrorCode.DELIVERY_FAILED


class DestinationNotBoundError(LinkRelayError):
    """An operation needed a bound destination but none was bound."""

    code = ErrorCode.NOT_BOUND


class FocusFailedError(LinkRelayError):
    """The bound destination could not be brought into view."""

    code = ErrorCode.FOCUS_FAILED


class DestinationNotImplementedError(LinkRelayError, NotImplementedError):
    """The requested destination kind is declared but has no implementation."""

    code = ErrorCode.NOT_IMPLEMENTED
