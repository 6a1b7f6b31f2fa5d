"""Shell clients: cURL."""

from __future__ import annotations

from collections.abc import Mapping
from shlex import quote
from typing import Any

from harsnip.snippet.base import PreparedRequest, SnippetClient

TARGET_KEY = "shell"
TARGET_TITLE = "Shell"

CURL = SnippetClient(
    key="curl",
    title="cURL",
    description="cURL is a command line tool and library for transferring data with URL syntax",
    link="http://curl.se/",
)

DEFAULT_INDENT = "  "


def render_curl(request: PreparedRequest, options: Mapping[str, Any]) -> str:
    """Render a cURL command.

    Options:
        indent: Continuation indent string, or ``False`` to put the whole
            command on one line. Defaults to two spaces.
        short: Use short flags (``-X``, ``-H``, ``-d``). Defaults to False.

    Returns:
        The command, one flag per line joined with ``\\`` continuations
        unless indentation is disabled.
    """
    indent = options.get("indent", DEFAULT_INDENT)
    short = bool(options.get("short", False))

    parts = [
        f"curl {'-X' if short else '--request'} {request.method}",
        quote(request.full_url) if short else f"--url {quote(request.full_url)}",
    ]
    header_flag = "-H" if short else "--header"
    for name, value in request.all_headers.items():
        parts.append(f"{header_flag} {quote(f'{name}: {value}')}")

    if request.post_data is not None and request.post_data.text:
        data_flag = "-d" if short else "--data"
        parts.append(f"{data_flag} {quote(request.post_data.text)}")

    if indent is False:
        return " ".join(parts)
    return f" \\\n{indent}".join(parts)
