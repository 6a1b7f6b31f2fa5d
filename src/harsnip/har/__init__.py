"""HAR (HTTP Archive) request models and conversion.

Example usage:
    from harsnip.har import HTTPRequest, convert_to_har_request

    request = HTTPRequest.from_mapping(
        "POST",
        "https://example.com/api",
        headers={"Authorization": "Basic alice secret"},
        body='{"name": "alice"}',
    )
    har_request = convert_to_har_request(request)
    print(har_request.to_dict())
"""

from harsnip.har.auth import normalize_auth_header
from harsnip.har.converter import (
    DEFAULT_MIME_TYPE,
    convert_to_har_request,
    encode_url,
    flatten_body,
    parse_cookie_header,
)
from harsnip.har.models import HARCookie, HARHeader, HARPostData, HARRequest, HTTPRequest

__all__ = [
    # Models
    "HTTPRequest",
    "HARRequest",
    "HARHeader",
    "HARCookie",
    "HARPostData",
    # Conversion
    "DEFAULT_MIME_TYPE",
    "convert_to_har_request",
    "encode_url",
    "flatten_body",
    "parse_cookie_header",
    "normalize_auth_header",
]
