"""Snippet controller: request text in, code snippet or cURL command out.

Ties the pieces together: the host supplies the request text, the parser
turns it into an ``HTTPRequest``, the converter produces a ``HARRequest`` and
the snippet engine renders it. Generation goes through the two-step
target/client selector; the cURL copy does not.
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Callable, Sequence
from typing import Any
from urllib.parse import urlsplit

from harsnip.har.converter import convert_to_har_request
from harsnip.har.models import HARRequest
from harsnip.host import PreviewSurface, RequestParser, SnippetHost
from harsnip.logging import get_logger, request_context
from harsnip.selector import TargetClientSelector
from harsnip.snippet.base import SnippetClient, SnippetTarget
from harsnip.snippet.engine import HTTPSnippet, available_targets

LOG = get_logger(__name__)

NO_TARGETS_MESSAGE = "No available code snippet convert targets"
GENERATE_EVENT = "Generate Code Snippet"
COPY_SNIPPET_EVENT = "Copy Code Snippet"
COPY_CURL_EVENT = "Copy Request As cURL"


def curl_options(platform: str | None = None) -> dict[str, Any]:
    """Rendering options for the cURL copy on the given platform.

    Windows shells do not understand ``\\`` line continuations, so the
    command is kept on one line there.
    """
    platform = platform or sys.platform
    return {"indent": False} if platform == "win32" else {}


def has_protocol(url: str) -> bool:
    """Return True if ``url`` starts with a scheme and a network location."""
    parts = urlsplit(url)
    return bool(parts.scheme and parts.netloc)


class SnippetController:
    """Generates code snippets for the request selected in a host.

    Args:
        host: UI surface providing request text, selection and clipboard.
        parser: Turns request text into an ``HTTPRequest``.
        preview: Surface that displays generated snippets.
        engine: Snippet engine class. Must accept a ``HARRequest`` and expose
            ``prepared.full_url`` and ``convert()``.
        catalog: Returns the available targets.
    """

    def __init__(
        self,
        host: SnippetHost,
        parser: RequestParser,
        preview: PreviewSurface,
        *,
        engine: type[HTTPSnippet] = HTTPSnippet,
        catalog: Callable[[], Sequence[SnippetTarget]] = available_targets,
    ) -> None:
        self._host = host
        self._parser = parser
        self._preview = preview
        self._engine = engine
        self._catalog = catalog
        self._last_snippet: str | None = None

    @property
    def last_snippet(self) -> str | None:
        """Most recently generated snippet. Each generation replaces it."""
        return self._last_snippet

    def _convert_selected(self) -> tuple[HARRequest, str] | None:
        request_text = self._host.get_request_text()
        if request_text is None:
            LOG.debug("no_request_selected")
            return None

        # Parse errors propagate to the caller
        http_request = self._parser.parse(request_text.text, request_text.context_id)
        return convert_to_har_request(http_request), request_text.context_id

    def generate_snippet(self) -> None:
        """Let the user pick a target and client, then preview the snippet.

        Does nothing when the host has no request selected. Parse and
        validation errors propagate. Preview errors are logged and reported
        through the host.
        """
        converted = self._convert_selected()
        if converted is None:
            return
        har_request, context_id = converted

        with request_context(context_id, action="generate"):
            snippet = self._engine(har_request)

            targets = self._catalog()
            if not targets:
                self._host.show_info(NO_TARGETS_MESSAGE)
                return

            def on_complete(target: SnippetTarget, client: SnippetClient) -> None:
                self._on_selection_complete(snippet, target, client)

            selector = TargetClientSelector(targets, on_complete=on_complete)
            self._host.show_selector(selector)

    def _on_selection_complete(
        self,
        snippet: HTTPSnippet,
        target: SnippetTarget,
        client: SnippetClient,
    ) -> None:
        self._host.record_event(GENERATE_EVENT, {"target": target.key, "client": client.key})
        result = snippet.convert(target.key, client.key)
        self._last_snippet = result
        LOG.info("snippet_generated", target=target.key, client=client.key)

        try:
            self._preview.render(result, f"{target.title}-{client.title}", target.key)
        except Exception as exc:  # noqa: BLE001
            LOG.exception("snippet_preview_failed", target=target.key, client=client.key)
            self._host.show_error(f"Unable to preview generated code snippet: {exc}")

    def copy_last_snippet(self) -> None:
        """Copy the last generated snippet to the clipboard, if there is one."""
        if self._last_snippet:
            self._host.record_event(COPY_SNIPPET_EVENT, {})
            self._host.write_clipboard(self._last_snippet)
            LOG.info("snippet_copied", length=len(self._last_snippet))

    def copy_as_curl(self) -> None:
        """Render the selected request as a cURL command and copy it.

        A URL without a scheme is validated as ``http://<url>`` but embedded
        in the command exactly as written.
        """
        converted = self._convert_selected()
        if converted is None:
            return
        har_request, context_id = converted

        with request_context(context_id, action="copy_curl"):
            original_url = har_request.url
            add_prefix = self._engine.requires_absolute_url and not has_protocol(original_url)
            if add_prefix:
                har_request = dataclasses.replace(har_request, url=f"http://{original_url}")

            snippet = self._engine(har_request)
            if add_prefix:
                snippet.prepared.full_url = original_url

            result = snippet.convert("shell", "curl", curl_options())
            self._host.record_event(COPY_CURL_EVENT, {"target": "shell", "client": "curl"})
            self._host.write_clipboard(result)
            LOG.info("curl_copied", prefixed=add_prefix)

    def dispose(self) -> None:
        """Release the preview surface."""
        self._preview.dispose()
