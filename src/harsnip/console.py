"""Centralized terminal output for harsnip.

All user-facing output should go through this module.

Key principle: stderr for status/progress, stdout for data.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# stderr console for status messages (prompts, success/error)
err_console = Console(stderr=True)

# stdout console for data output (snippets, JSON, tables)
out_console = Console()


def success(message: str, *, console: Console | None = None) -> None:
    """Print a success message (green checkmark) to stderr."""
    c = console or err_console
    c.print(f"[green]  ✓ {escape(message)}[/green]")


def error(message: str, *, console: Console | None = None) -> None:
    """Print an error message (red X) to stderr."""
    c = console or err_console
    c.print(f"[red]  ✗ {escape(message)}[/red]")


def warn(message: str, *, console: Console | None = None) -> None:
    """Print a warning message (yellow) to stderr."""
    c = console or err_console
    c.print(f"[yellow]  ⚠ {escape(message)}[/yellow]")


def info(message: str, *, console: Console | None = None) -> None:
    """Print an info message (dim) to stderr."""
    c = console or err_console
    c.print(f"[dim]  {escape(message)}[/dim]")
