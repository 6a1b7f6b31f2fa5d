"""Python clients: requests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from harsnip.snippet.base import PreparedRequest, SnippetClient

TARGET_KEY = "python"
TARGET_TITLE = "Python"

REQUESTS = SnippetClient(
    key="requests",
    title="Requests",
    description="Requests HTTP library",
    link="https://requests.readthedocs.io/",
)


def _literal(value: str) -> str:
    # JSON string escapes are valid Python string escapes
    return json.dumps(value, ensure_ascii=False)


def render_requests(request: PreparedRequest, options: Mapping[str, Any]) -> str:
    """Render a script using the requests library.

    Options:
        indent: Indent used inside the headers dict. Defaults to four spaces.
    """
    indent = options.get("indent") or "    "

    lines = ["import requests", "", f"url = {_literal(request.full_url)}", ""]
    args = [_literal(request.method), "url"]

    if request.post_data is not None and request.post_data.text:
        lines.append(f"payload = {_literal(request.post_data.text)}")
        args.append("data=payload")

    if request.all_headers:
        lines.append("headers = {")
        for name, value in request.all_headers.items():
            lines.append(f"{indent}{_literal(name)}: {_literal(value)},")
        lines.append("}")
        args.append("headers=headers")

    if lines[-1] != "":
        lines.append("")
    lines.append(f"response = requests.request({', '.join(args)})")
    lines.append("")
    lines.append("print(response.text)")
    return "\n".join(lines)
