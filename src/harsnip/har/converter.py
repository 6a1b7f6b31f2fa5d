"""Conversion of parsed HTTP requests into HAR requests."""

from __future__ import annotations

import re
from urllib.parse import quote

from harsnip.har.auth import normalize_auth_header
from harsnip.har.models import HARCookie, HARHeader, HARPostData, HARRequest, HTTPRequest
from harsnip.logging import get_logger

LOG = get_logger(__name__)

DEFAULT_MIME_TYPE = "application/json"

# Characters left alone when encoding a URL: the RFC 3986 reserved and
# unreserved sets plus the few extras browsers send unescaped. A "%" is kept
# only when it starts a valid escape sequence.
_UNSAFE_URL_CHARS = re.compile(
    r"%(?![0-9A-Fa-f]{2})|[^\x21\x23-\x3B\x3D\x3F-\x5F\x61-\x7A\x7C\x7E]"
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _escape_char(match: re.Match[str]) -> str:
    char = match.group(0)
    if "\ud800" <= char <= "\udfff":
        # Lone surrogates cannot be UTF-8 encoded
        char = "\ufffd"
    return quote(char, safe="")


def encode_url(url: str) -> str:
    """Percent-encode unsafe characters in a URL.

    Existing ``%XX`` escapes are preserved, so encoding is idempotent.

    Example:
        >>> encode_url("example.com/a b?q=%20x")
        'example.com/a%20b?q=%20x'
    """
    return _UNSAFE_URL_CHARS.sub(_escape_char, url)


def flatten_body(body: str) -> str:
    """Remove line breaks from a text body.

    Each line is stripped of surrounding whitespace and the lines are joined
    with no separator, so indented JSON collapses onto one line.

    Example:
        >>> flatten_body('{\\n  "a": 1,\\n  "b": 2\\n}\\n')
        '{"a": 1,"b": 2}'
    """
    return "".join(line.strip() for line in _LINE_BREAK.split(body))


def _convert_headers(request: HTTPRequest) -> list[HARHeader]:
    headers: list[HARHeader] = []
    for name, values in request.headers.items():
        if not values:
            continue
        is_auth = name.lower() == "authorization"
        for value in values:
            if is_auth:
                value = normalize_auth_header(value)
            headers.append(HARHeader(name, value))
    return headers


def parse_cookie_header(value: str) -> list[HARCookie]:
    """Split a Cookie header value into HAR cookies.

    Pairs are separated by ``;`` and split on the first ``=``. A pair without
    ``=`` gets an empty value. Empty names produced by stray separators are
    kept.

    Example:
        >>> [(c.name, c.value) for c in parse_cookie_header("a=1; b = 2 ; c")]
        [('a', '1'), ('b', '2'), ('c', '')]
    """
    cookies: list[HARCookie] = []
    for pair in value.split(";"):
        name, _, cookie_value = pair.partition("=")
        cookies.append(HARCookie(name.strip(), cookie_value.strip()))
    return cookies


def _find_header(headers: list[HARHeader], name: str) -> HARHeader | None:
    return next((h for h in headers if h.name.lower() == name), None)


def _convert_body(request: HTTPRequest, headers: list[HARHeader]) -> HARPostData | None:
    if not request.body:
        return None

    content_type = _find_header(headers, "content-type")
    mime_type = content_type.value if content_type is not None else DEFAULT_MIME_TYPE

    if isinstance(request.body, str):
        return HARPostData(mime_type, flatten_body(request.body))

    if request.raw_body is not None:
        return HARPostData(mime_type, request.raw_body)
    return HARPostData(mime_type, request.body.decode("utf-8", errors="replace"))


def convert_to_har_request(request: HTTPRequest) -> HARRequest:
    """Convert a parsed HTTP request into a HAR request.

    Multi-value headers become one HAR header per value, in order. Basic
    ``Authorization`` headers are normalized, cookies are derived from the
    first ``Cookie`` header (which is kept in the header list), and the body
    becomes ``postData``. Missing pieces are omitted rather than reported.

    Args:
        request: Parsed request.

    Returns:
        A new, immutable HAR request.
    """
    headers = _convert_headers(request)

    cookie_header = _find_header(headers, "cookie")
    cookies = parse_cookie_header(cookie_header.value) if cookie_header is not None else []

    post_data = _convert_body(request, headers)

    har_request = HARRequest(
        method=request.method,
        url=encode_url(request.url),
        headers=tuple(headers),
        cookies=tuple(cookies),
        post_data=post_data,
    )
    LOG.debug(
        "har_request_converted",
        method=har_request.method,
        url=har_request.url,
        headers=len(har_request.headers),
        cookies=len(har_request.cookies),
        has_body=post_data is not None,
    )
    return har_request
