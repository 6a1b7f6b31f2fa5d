"""Request models: the generic parsed request and its HAR counterpart.

HAR format specification: http://www.softwareishard.com/blog/har-12-spec/
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class HTTPRequest:
    """Generic HTTP request produced by a request parser.

    Attributes:
        method: HTTP verb, e.g. "GET".
        url: Request URL. Need not carry a scheme.
        headers: Header name to ordered list of values. Insertion order is
            the order headers appeared in the source.
        body: Request body. ``str`` for text bodies, ``bytes`` for payloads
            read from files or streams, ``None`` when there is no body.
        raw_body: Textual form of a non-string body, used verbatim when the
            request is converted.
    """

    method: str
    url: str
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: str | bytes | None = None
    raw_body: str | None = None

    @classmethod
    def from_mapping(
        cls,
        method: str,
        url: str,
        headers: Mapping[str, str | Sequence[str] | None] | None = None,
        body: str | bytes | None = None,
        raw_body: str | None = None,
    ) -> HTTPRequest:
        """Build a request from headers given as scalars or lists.

        Scalar values become single-element lists. ``None`` and empty string
        values become empty lists so they are dropped on conversion.
        """
        normalized: dict[str, list[str]] = {}
        for name, value in (headers or {}).items():
            if value is None or value == "":
                normalized[name] = []
            elif isinstance(value, str):
                normalized[name] = [value]
            else:
                normalized[name] = [str(v) for v in value]
        return cls(method=method, url=url, headers=normalized, body=body, raw_body=raw_body)


@dataclass(frozen=True)
class HARHeader:
    """Single HAR header entry."""

    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class HARCookie:
    """Single HAR cookie entry derived from a Cookie request header."""

    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class HARPostData:
    """HAR postData object."""

    mime_type: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"mimeType": self.mime_type, "text": self.text}


@dataclass(frozen=True)
class HARRequest:
    """Normalized HAR request consumed by the snippet engine.

    Instances are immutable; converting the same ``HTTPRequest`` twice yields
    two equal but independent objects.
    """

    method: str
    url: str
    headers: tuple[HARHeader, ...] = ()
    cookies: tuple[HARCookie, ...] = ()
    post_data: HARPostData | None = None

    def find_header(self, name: str) -> HARHeader | None:
        """Return the first header whose name matches case-insensitively."""
        wanted = name.lower()
        return next((h for h in self.headers if h.name.lower() == wanted), None)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the HAR 1.2 request object shape."""
        data: dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "httpVersion": "HTTP/1.1",
            "headers": [h.to_dict() for h in self.headers],
            "cookies": [c.to_dict() for c in self.cookies],
            "queryString": [],
            "headersSize": -1,
            "bodySize": -1,
        }
        if self.post_data is not None:
            data["postData"] = self.post_data.to_dict()
        return data
