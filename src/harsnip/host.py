"""Interfaces the snippet controller uses to reach its surroundings.

The controller never talks to a terminal, editor or clipboard directly. A
host (``harsnip.cli.host.TerminalHost`` for the command line, a fake in
tests) implements these protocols.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from harsnip.har.models import HTTPRequest
    from harsnip.selector import TargetClientSelector


@dataclass(frozen=True)
class RequestText:
    """Raw text of the request the user picked.

    Attributes:
        text: Request text as written in the document.
        context_id: Identifier of the source document (usually a file path),
            passed to the parser for resolving relative references.
    """

    text: str
    context_id: str


class RequestParser(Protocol):
    """Turns request text into a generic HTTP request."""

    def parse(self, raw_text: str, context_id: str) -> HTTPRequest:
        """Parse request text.

        Raises:
            RequestParseError: If the text is malformed.
        """
        ...


class SnippetHost(Protocol):
    """UI surface: document access, selection UI, clipboard, notifications."""

    def get_request_text(self) -> RequestText | None:
        """Return the selected request, or None if there is nothing to convert."""
        ...

    def show_selector(self, selector: TargetClientSelector) -> None:
        """Display the selector and forward user input to it."""
        ...

    def write_clipboard(self, text: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_info(self, message: str) -> None: ...

    def record_event(self, name: str, properties: Mapping[str, str]) -> None:
        """Record a usage event."""
        ...


class PreviewSurface(Protocol):
    """Where generated snippets are displayed."""

    def render(self, snippet: str, title: str, target_key: str) -> None:
        """Show a snippet.

        Raises:
            PreviewError: If the snippet cannot be displayed.
        """
        ...

    def dispose(self) -> None:
        """Release any resource held by the surface."""
        ...
