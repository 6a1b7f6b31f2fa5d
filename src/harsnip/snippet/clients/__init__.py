"""Built-in snippet clients.

Each entry is ``(target_key, target_title, client, render)``. Targets appear
in the catalog in this order.
"""

from harsnip.snippet.clients import python, shell

BUILTIN_CLIENTS = [
    (shell.TARGET_KEY, shell.TARGET_TITLE, shell.CURL, shell.render_curl),
    (python.TARGET_KEY, python.TARGET_TITLE, python.REQUESTS, python.render_requests),
]

__all__ = ["BUILTIN_CLIENTS"]
