"""harsnip - turn HTTP requests into code snippets.

Converts parsed HTTP requests into HAR request objects and renders them as
code for a chosen target language and client library.

This package provides:
- HAR conversion with header, cookie, body and Basic auth normalization
- A two-step target/client selector driven by any UI host
- A snippet controller for previewing snippets and copying cURL commands
- A pluggable snippet engine (built-in: shell/curl, python/requests)

Example:
    >>> from harsnip import HTTPRequest, HTTPSnippet, convert_to_har_request
    >>> request = HTTPRequest.from_mapping("GET", "https://example.com/api")
    >>> print(HTTPSnippet(convert_to_har_request(request)).convert("shell", "curl"))
    curl --request GET \\
      --url https://example.com/api
"""

from harsnip.config import HarsnipSettings, get_settings
from harsnip.controller import SnippetController
from harsnip.documents import DocumentRequestParser, split_request_blocks
from harsnip.exceptions import (
    ClipboardError,
    HarsnipError,
    NoTargetsError,
    PreviewError,
    RequestParseError,
    SelectorError,
    SelectorStateError,
    SnippetError,
    SnippetValidationError,
    UnknownTargetError,
)
from harsnip.har import (
    HARCookie,
    HARHeader,
    HARPostData,
    HARRequest,
    HTTPRequest,
    convert_to_har_request,
    normalize_auth_header,
)
from harsnip.host import PreviewSurface, RequestParser, RequestText, SnippetHost
from harsnip.selector import SelectionItem, SelectorState, TargetClientSelector
from harsnip.snippet import (
    HTTPSnippet,
    SnippetClient,
    SnippetTarget,
    available_targets,
    register_client,
    render_snippet,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Conversion
    "HTTPRequest",
    "HARRequest",
    "HARHeader",
    "HARCookie",
    "HARPostData",
    "convert_to_har_request",
    "normalize_auth_header",
    # Selection
    "TargetClientSelector",
    "SelectorState",
    "SelectionItem",
    # Controller and host interfaces
    "SnippetController",
    "SnippetHost",
    "PreviewSurface",
    "RequestParser",
    "RequestText",
    # Request documents
    "DocumentRequestParser",
    "split_request_blocks",
    # Snippet engine
    "HTTPSnippet",
    "SnippetClient",
    "SnippetTarget",
    "available_targets",
    "register_client",
    "render_snippet",
    # Configuration
    "HarsnipSettings",
    "get_settings",
    # Exceptions
    "HarsnipError",
    "RequestParseError",
    "SnippetError",
    "SnippetValidationError",
    "UnknownTargetError",
    "SelectorError",
    "NoTargetsError",
    "SelectorStateError",
    "PreviewError",
    "ClipboardError",
]
