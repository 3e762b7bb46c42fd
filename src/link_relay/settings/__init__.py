"""
Settings management module for Link Relay.

This module provides configuration management including:
- Settings data model
- YAML-based configuration storage
- Configuration validation
"""

from .models import Settings
from .storage import SettingsStorage
from .validation import ConfigValidator, ValidationResult

__all__ = [
    "Settings",
    "SettingsStorage",
    "ConfigValidator",
    "ValidationResult",
]
