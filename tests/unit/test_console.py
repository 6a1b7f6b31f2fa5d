"""Tests for the console output module."""

import io

from rich.console import Console

from harsnip.console import (
    error,
    info,
    success,
    warn,
)


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, stderr=True, no_color=True, width=200), buf


class TestConsoleHelpers:
    """Tests for console helper functions."""

    def test_success_outputs_green_check(self) -> None:
        """Test success prints green checkmark to stderr."""
        test_console, buf = _console()
        success("Done", console=test_console)
        assert "✓ Done" in buf.getvalue()

    def test_error_outputs_red_x(self) -> None:
        """Test error prints red X to stderr."""
        test_console, buf = _console()
        error("Failed", console=test_console)
        assert "✗ Failed" in buf.getvalue()

    def test_warn_outputs_yellow(self) -> None:
        """Test warn prints yellow message to stderr."""
        test_console, buf = _console()
        warn("Careful", console=test_console)
        assert "⚠ Careful" in buf.getvalue()

    def test_info_outputs_dim(self) -> None:
        """Test info prints dim message to stderr."""
        test_console, buf = _console()
        info("Note", console=test_console)
        assert "Note" in buf.getvalue()

    def test_markup_in_message_is_escaped(self) -> None:
        """Square brackets from user data are printed literally."""
        test_console, buf = _console()
        error("Invalid request in [bold]api.yaml[/bold]", console=test_console)
        assert "[bold]api.yaml[/bold]" in buf.getvalue()
