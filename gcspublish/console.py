"""Rich console abstraction layer for gcspublish CLI output.

All user-facing CLI output goes through this module. Handles the NO_COLOR
environment variable and CI/CD compatibility.
"""

from __future__ import annotations

import os
from typing import Optional

from rich.console import Console
from rich.markup import escape

# Singleton console instance
_console: Optional[Console] = None


def get_console() -> Console:
    """Get or create the singleton Rich Console instance.

    Respects NO_COLOR environment variable and detects CI environments.

    Returns:
        Console: Rich Console instance
    """
    global _console
    if _console is None:
        no_color = os.getenv("NO_COLOR", "").lower() in ("1", "true", "yes")
        is_ci = os.getenv("CI", "").lower() in ("1", "true", "yes")
        force_terminal = not (no_color or is_ci)

        _console = Console(
            force_terminal=force_terminal,
            no_color=no_color,
            highlight=False,  # Prevent auto-highlighting of paths
        )
    return _console


def success(message: str, emoji: bool = True) -> None:
    """Display success message in green with checkmark.

    Args:
        message: Success message to display
        emoji: Include ✓ emoji (default: True)
    """
    console = get_console()
    prefix = "✓ " if emoji else ""
    console.print(f"[green]{prefix}{message}[/green]")


def error(message: str, emoji: bool = True) -> None:
    """Display error message in red with cross.

    Args:
        message: Error message to display
        emoji: Include ✗ emoji (default: True)
    """
    console = get_console()
    prefix = "✗ " if emoji else ""
    console.print(f"[red]{prefix}{message}[/red]")


def warning(message: str, emoji: bool = True) -> None:
    """Display warning message in yellow with warning symbol."""
    console = get_console()
    prefix = "⚠ " if emoji else ""
    console.print(f"[yellow]{prefix}{message}[/yellow]")


def info(message: str, bold: bool = False) -> None:
    """Display informational message.

    Args:
        message: Info message to display
        bold: Make text bold (default: False)
    """
    console = get_console()
    style = "bold" if bold else ""
    console.print(message, style=style)


def brand(message: str, bold: bool = True) -> None:
    """Display brand message in magenta."""
    console = get_console()
    style = "magenta bold" if bold else "magenta"
    console.print(message, style=style)


def uploaded(destination: str) -> None:
    """Announce an uploaded object, with its destination key in cyan.

    Args:
        destination: Destination key of the object in the bucket
    """
    console = get_console()
    console.print(f"Uploaded [cyan]{escape(destination)}[/cyan]")


def newline() -> None:
    """Print a blank line."""
    console = get_console()
    console.print()
