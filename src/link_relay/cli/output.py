"""
Rich Terminal Output for Link Relay CLI

Provides tables, panels and styled status lines for the diagnostic commands.
Uses the Rich library for all formatting.
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..destinations.base import DestinationKind
from ..destinations.detection import DetectionResult


class OutputManager:
    """
    Manages rich terminal output for Link Relay CLI.

    Provides consistent styling and formatting for:
    - Destination kind tables
    - Detection results
    - Configuration display
    - Validation messages
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the output manager.

        Args:
            console: Rich Console instance (creates one if not provided)
        """
        self.console = console or Console()

    # ==================== Basic Output ====================

    def print(self, message: str = "", style: str | None = None) -> None:
        """
        Print a message with optional styling.

        Args:
            message: Message to print (defaults to empty string for blank line)
            style: Optional rich style string
        """
        self.console.print(message, style=style)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]v[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]x[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    # ==================== Tables ====================

    def kinds_table(self, display_names: Dict[DestinationKind, str], implemented: List[DestinationKind]) -> None:
        """
        Display the destination kinds.

        Args:
            display_names: User-facing name per kind
            implemented: Kinds the factory can create
        """
        table = Table(title="Destination Kinds")
        table.add_column("Kind", style="cyan")
        table.add_column("Display Name")
        table.add_column("Resource", justify="center")
        table.add_column("Implemented", justify="center")

        for kind, name in display_names.items():
            table.add_row(
                kind.value,
                name,
                "yes" if kind.is_resource_bound else "-",
                "[green]v[/green]" if kind in implemented else "[red]x[/red]",
            )

        self.console.print(table)

    def detection_table(self, results: Dict[DestinationKind, DetectionResult]) -> None:
        """
        Display detection chain results per chat kind.

        Args:
            results: Detection result per chat kind
        """
        table = Table(title="Chat Detection")
        table.add_column("Kind", style="cyan")
        table.add_column("Detected", justify="center")
        table.add_column("Method")
        table.add_column("Evidence", style="dim")

        for kind, result in results.items():
            table.add_row(
                kind.value,
                "[green]v[/green]" if result.detected else "[red]x[/red]",
                result.method.value if result.method else "-",
                escape(result.evidence) if result.evidence else "-",
            )

        self.console.print(table)

    # ==================== Configuration Display ====================

    def config_display(self, config: dict[str, Any]) -> None:
        """
        Display configuration.

        Args:
            config: Configuration dictionary
        """
        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config.items():
            if isinstance(value, list):
                value = ", ".join(value) if value else "(default)"
            table.add_row(key, escape(str(value)))

        self.console.print(table)

    def validation_panel(self, errors: List[str], warnings: List[str]) -> None:
        """Display validation problems, if any."""
        if not errors and not warnings:
            return

        lines = [f"[red]x[/red] {escape(error)}" for error in errors]
        lines.extend(f"[yellow]![/yellow] {escape(warning)}" for warning in warnings)

        self.console.print(Panel(
            "\n".join(lines),
            title="Validation",
            border_style="red" if errors else "yellow",
        ))

