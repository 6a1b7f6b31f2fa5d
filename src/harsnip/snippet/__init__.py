"""Code snippet generation from HAR requests.

Example usage:
    from harsnip.snippet import HTTPSnippet, available_targets

    for target in available_targets():
        print(target.title, [c.title for c in target.clients])

    snippet = HTTPSnippet(har_request)
    print(snippet.convert("python", "requests"))
"""

from harsnip.snippet.base import (
    ClientPlugin,
    PreparedRequest,
    RenderFunc,
    SnippetClient,
    SnippetTarget,
    prepare_request,
)
from harsnip.snippet.engine import (
    CLIENTS_GROUP,
    HTTPSnippet,
    available_targets,
    discover_clients,
    register_client,
    render_snippet,
    validate_request,
)

__all__ = [
    # Catalog
    "SnippetClient",
    "SnippetTarget",
    "available_targets",
    "register_client",
    "discover_clients",
    "CLIENTS_GROUP",
    # Rendering
    "ClientPlugin",
    "HTTPSnippet",
    "PreparedRequest",
    "RenderFunc",
    "prepare_request",
    "render_snippet",
    "validate_request",
]
