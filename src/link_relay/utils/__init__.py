"""Shared helpers for Link Relay."""

from .text import apply_smart_padding, is_eligible_for_paste

__all__ = [
    "apply_smart_padding",
    "is_eligible_for_paste",
]
