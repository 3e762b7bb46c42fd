"""
Text helpers used before delivering content to a destination.
"""

from typing import Optional


def is_eligible_for_paste(text: Optional[str]) -> bool:
    """
    Check that text has meaningful content.

    Args:
        text: Text to check (may be None)

    Returns:
        False for None, empty or whitespace-only text, True otherwise
    """
    if not text:
        return False
    return bool(text.strip())


def apply_smart_padding(text: str) -> str:
    """
    Surround text with a single separating space where one is missing.

    A leading space is added only if the text does not already start with
    whitespace, and a trailing space only if it does not already end with
    whitespace. Padding an already padded string returns it unchanged.
    Whitespace-only input collapses to an empty string.

    Args:
        text: Text to pad

    Returns:
        Padded text
    """
    if not text.strip():
        return ""

    result = text
    if not text[0].isspace():
        result = f" {result}"
    if not text[-1].isspace():
        result = f"{result} "
    return result
