"""Authorization header normalization."""

from __future__ import annotations

import base64


def normalize_auth_header(value: str) -> str:
    """Rewrite ``Basic <user> <password>`` into standard Basic credentials.

    Callers may write Basic credentials either pre-encoded or as a raw
    ``user password`` pair. The raw form is base64-encoded; every other shape
    is returned unchanged.

    Args:
        value: Authorization header value.

    Returns:
        ``"Basic " + base64("user:password")`` for the raw pair form,
        otherwise the original value.

    Example:
        >>> normalize_auth_header("Basic alice secret")
        'Basic YWxpY2U6c2VjcmV0'
        >>> normalize_auth_header("Bearer token")
        'Bearer token'
    """
    if not value or " " not in value:
        return value

    scheme, _, rest = value.partition(" ")
    if scheme.lower() != "basic":
        return value

    params = rest.strip().split(" ")
    if len(params) != 2:
        return value

    user, password = params
    encoded = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
    return f"Basic {encoded}"
