"""
Link Relay CLI Module

Diagnostic command-line interface built on typer and rich.
"""

from .main import app, main
from .output import OutputManager

__all__ = [
    "app",
    "main",
    "OutputManager",
]
