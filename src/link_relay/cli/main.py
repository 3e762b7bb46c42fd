#!/usr/bin/env python3
"""
Link Relay CLI

Diagnostic command-line interface for the destination binding core.

Commands:
- link-relay kinds: List destination kinds and whether they are implemented
- link-relay detect: Run the chat detection chain against a described host
- link-relay pad <text>: Show the smart-padded form of a text
- link-relay config: Configuration management
- link-relay version: Show version information
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..destinations.detection import EnvironmentDetector
from ..destinations.factory import DestinationFactory
from ..host import HostEnvironment
from ..settings.storage import SettingsStorage
from ..settings.validation import ConfigValidator
from ..utils.text import apply_smart_padding
from .output import OutputManager

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="link-relay",
    help="Link Relay - route code references to a bound destination",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
output = OutputManager(console)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help="Configuration directory"),
):
    """Link Relay diagnostics."""
    storage = SettingsStorage(config_dir)
    settings = storage.load()

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug(f"Using configuration at {storage.config_file}")

    ctx.obj = storage


@app.command()
def kinds():
    """List destination kinds."""
    output.kinds_table(
        DestinationFactory.get_display_names(),
        DestinationFactory.get_supported_kinds(),
    )


@app.command()
def detect(
    app_name: str = typer.Option("", "--app-name", "-a", help="Host application name"),
    extension: Optional[List[str]] = typer.Option(None, "--extension", "-e", help="Installed extension id (repeatable)"),
    uri_scheme: str = typer.Option("", "--uri-scheme", "-s", help="Host URI scheme"),
    inactive: Optional[List[str]] = typer.Option(
        None, "--inactive", "-i", help="Installed but inactive extension id (repeatable)"
    ),
):
    """
    Run the chat detection chain against a described host.

    Examples:
        link-relay detect --app-name Cursor
        link-relay detect -e anthropic.claude-code -e ms-python.python
        link-relay detect --uri-scheme vscode
    """
    environment = HostEnvironment(
        app_name=app_name,
        extension_ids=list(extension or []),
        uri_scheme=uri_scheme,
        inactive_extension_ids=list(inactive or []),
    )
    detector = EnvironmentDetector(environment)

    results = {
        kind: detector.detect(profile)
        for kind, profile in DestinationFactory.get_chat_profiles().items()
    }
    output.detection_table(results)

    if not any(result.detected for result in results.values()):
        output.print_warning("No chat assistant detected")


@app.command()
def pad(
    text: str = typer.Argument(..., help="Text to pad"),
):
    """Show the smart-padded form of TEXT."""
    padded = apply_smart_padding(text)
    if not padded:
        output.print_warning("Text is blank, nothing would be delivered")
        return
    output.print(f'"{escape(padded)}"')


@app.command()
def config(
    ctx: typer.Context,
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Set focus command timeout in seconds"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
):
    """
    Configuration management.

    Examples:
        link-relay config --show
        link-relay config --timeout 2.5
        link-relay config --log-level debug
    """
    storage: SettingsStorage = ctx.obj
    if timeout is not None or log_level is not None:
        _update_config(storage, timeout, log_level)
    elif show:
        _show_config(storage)
    else:
        output.print("Use --show to view configuration or --timeout/--log-level to change it")


def _show_config(storage: SettingsStorage):
    """Show current configuration."""
    settings = storage.load()

    output.config_display({
        "Config File": storage.config_file,
        "Focus Command Timeout": f"{settings.focus_command_timeout_seconds}s",
        "Cursor AI Focus Commands": settings.cursor_ai_focus_commands,
        "Claude Code Focus Commands": settings.claude_code_focus_commands,
        "Log Level": settings.log_level,
    })

    result = ConfigValidator.validate(settings)
    output.validation_panel(result.errors, result.warnings)


def _update_config(storage: SettingsStorage, timeout: Optional[float], log_level: Optional[str]):
    """Update and save configuration, refusing invalid values."""
    settings = storage.load()

    if timeout is not None:
        settings.focus_command_timeout_seconds = timeout
    if log_level is not None:
        settings.log_level = log_level.upper()

    result = ConfigValidator.validate(settings)
    output.validation_panel(result.errors, result.warnings)
    if not result.valid:
        output.print_error("Configuration not saved")
        raise typer.Exit(1)

    storage.save(settings)
    output.print_success(f"Configuration saved to {storage.config_file}")


@app.command()
def version():
    """Show version information."""
    output.print(f"Link Relay v{__version__}")
    output.print("[dim]Route code references to a bound destination[/dim]")


def main():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
