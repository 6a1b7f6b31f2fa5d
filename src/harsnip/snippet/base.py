"""Catalog types and the prepared request handed to client renderers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import quote

from harsnip.har.models import HARCookie, HARHeader, HARPostData, HARRequest


@dataclass(frozen=True)
class SnippetClient:
    """A library or tool within a target that performs the request.

    Attributes:
        key: Stable identifier, e.g. "curl".
        title: Display name, e.g. "cURL".
        description: One-line description shown next to the title.
        link: Homepage of the library or tool.
    """

    key: str
    title: str
    description: str = ""
    link: str = ""


@dataclass(frozen=True)
class SnippetTarget:
    """An output language or ecosystem and the clients available for it."""

    key: str
    title: str
    clients: tuple[SnippetClient, ...] = ()


@dataclass
class PreparedRequest:
    """Request data in the shape client renderers consume.

    ``full_url`` is mutable so callers can override the URL that ends up in
    the rendered snippet after validation has run.
    """

    method: str
    url: str
    full_url: str
    headers: tuple[HARHeader, ...] = ()
    cookies: tuple[HARCookie, ...] = ()
    post_data: HARPostData | None = None
    all_headers: dict[str, str] = field(default_factory=dict)


RenderFunc = Callable[[PreparedRequest, Mapping[str, Any]], str]


class ClientPlugin(Protocol):
    """Protocol for third-party clients discovered via entry points.

    The entry point must resolve to an object (module, class or instance)
    exposing these attributes.
    """

    target_key: str
    target_title: str
    client: SnippetClient

    def render(self, request: PreparedRequest, options: Mapping[str, Any]) -> str:
        """Render the prepared request as source text."""
        ...


def _merge_headers(headers: tuple[HARHeader, ...]) -> dict[str, str]:
    merged: dict[str, str] = {}
    for header in headers:
        if header.name in merged:
            merged[header.name] = f"{merged[header.name]}, {header.value}"
        else:
            merged[header.name] = header.value
    return merged


def prepare_request(request: HARRequest) -> PreparedRequest:
    """Build the renderer view of a HAR request.

    Headers sharing a name are merged into one comma-separated value. A
    ``cookie`` header is synthesized from the cookie list only when the
    request has cookies but no Cookie header of its own.
    """
    all_headers = _merge_headers(request.headers)
    if request.cookies and request.find_header("cookie") is None:
        all_headers["cookie"] = "; ".join(
            f"{quote(c.name, safe='')}={quote(c.value, safe='')}" for c in request.cookies
        )

    return PreparedRequest(
        method=request.method,
        url=request.url,
        full_url=request.url,
        headers=request.headers,
        cookies=request.cookies,
        post_data=request.post_data,
        all_headers=all_headers,
    )
