"""Snippet engine: validation, client registry and rendering.

Targets and clients live in a module-level registry. Built-in clients are
registered on import; third-party clients are discovered from the
``harsnip.clients`` entry-point group the first time the catalog is used.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from typing import Any, ClassVar
from urllib.parse import urlsplit

from harsnip.exceptions import SnippetValidationError, UnknownTargetError
from harsnip.har.models import HARRequest
from harsnip.logging import get_logger
from harsnip.snippet.base import (
    ClientPlugin,
    PreparedRequest,
    RenderFunc,
    SnippetClient,
    SnippetTarget,
    prepare_request,
)
from harsnip.snippet.clients import BUILTIN_CLIENTS

LOG = get_logger(__name__)

CLIENTS_GROUP = "harsnip.clients"


@dataclass
class _TargetEntry:
    title: str
    clients: dict[str, tuple[SnippetClient, RenderFunc]] = field(default_factory=dict)


_REGISTRY: dict[str, _TargetEntry] = {}
_plugins_loaded = False


def register_client(
    target_key: str,
    client: SnippetClient,
    render: RenderFunc,
    *,
    target_title: str | None = None,
) -> None:
    """Register a client renderer under a target.

    The target is created on first use; ``target_title`` defaults to the key.

    Raises:
        ValueError: If the client key is already registered for the target.

    Example:
        >>> register_client("shell", SnippetClient("wget", "Wget"), render_wget)
    """
    entry = _REGISTRY.get(target_key)
    if entry is None:
        entry = _REGISTRY[target_key] = _TargetEntry(title=target_title or target_key)
    if client.key in entry.clients:
        raise ValueError(f"Client '{client.key}' is already registered for target '{target_key}'")
    entry.clients[client.key] = (client, render)


def _register_builtins() -> None:
    for target_key, target_title, client, render in BUILTIN_CLIENTS:
        register_client(target_key, client, render, target_title=target_title)


def discover_clients() -> int:
    """Register clients exposed through the ``harsnip.clients`` entry points.

    Plugins that fail to load or collide with a registered client are
    skipped with a warning.

    Returns:
        Number of clients registered.
    """
    count = 0
    for ep in entry_points(group=CLIENTS_GROUP):
        try:
            plugin: ClientPlugin = ep.load()
            register_client(
                plugin.target_key,
                plugin.client,
                plugin.render,
                target_title=plugin.target_title,
            )
            count += 1
            LOG.debug("client_plugin_loaded", name=ep.name, target=plugin.target_key)
        except Exception as exc:
            LOG.exception("client_plugin_load_failed", name=ep.name, error=str(exc))
            warnings.warn(
                f"Snippet client '{ep.name}' failed to load: {exc}",
                UserWarning,
                stacklevel=2,
            )
    LOG.info("client_plugins_discovered", group=CLIENTS_GROUP, count=count)
    return count


def _ensure_plugins() -> None:
    global _plugins_loaded
    if not _plugins_loaded:
        _plugins_loaded = True
        discover_clients()


def available_targets() -> list[SnippetTarget]:
    """Return the target/client catalog in registration order."""
    _ensure_plugins()
    return [
        SnippetTarget(
            key=key,
            title=entry.title,
            clients=tuple(client for client, _ in entry.clients.values()),
        )
        for key, entry in _REGISTRY.items()
        if entry.clients
    ]


def _resolve(target_key: str, client_key: str | None) -> RenderFunc:
    _ensure_plugins()
    entry = _REGISTRY.get(target_key)
    if entry is None or not entry.clients:
        raise UnknownTargetError(target_key)
    if client_key is None:
        # First registered client is the target default
        _, render = next(iter(entry.clients.values()))
        return render
    if client_key not in entry.clients:
        raise UnknownTargetError(target_key, client_key)
    return entry.clients[client_key][1]


def validate_request(request: HARRequest) -> None:
    """Check that a HAR request can be rendered.

    Raises:
        SnippetValidationError: If the method is empty or the URL is not
            absolute (scheme and host are required).
    """
    if not request.method:
        raise SnippetValidationError("HAR request method must not be empty")
    parts = urlsplit(request.url)
    if not parts.scheme or not parts.netloc:
        raise SnippetValidationError(
            f"HAR request url must be an absolute URI with a scheme and host: {request.url!r}"
        )


class HTTPSnippet:
    """A validated HAR request ready to be rendered for any registered client.

    Example:
        >>> snippet = HTTPSnippet(har_request)
        >>> print(snippet.convert("shell", "curl"))
    """

    requires_absolute_url: ClassVar[bool] = True

    def __init__(self, request: HARRequest) -> None:
        validate_request(request)
        self.request = request
        self.prepared: PreparedRequest = prepare_request(request)

    def convert(
        self,
        target: str,
        client: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Render the request for a target/client pair.

        Args:
            target: Target key, e.g. "shell".
            client: Client key within the target. Defaults to the target's
                first client.
            options: Client-specific rendering options.

        Raises:
            UnknownTargetError: If the target or client is not registered.
        """
        render = _resolve(target, client)
        result = render(self.prepared, options or {})
        LOG.debug("snippet_rendered", target=target, client=client, length=len(result))
        return result


def render_snippet(
    request: HARRequest,
    target_key: str,
    client_key: str | None = None,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Validate and render a HAR request in one call."""
    return HTTPSnippet(request).convert(target_key, client_key, options)


_register_builtins()
