"""Request documents: YAML/JSON request descriptions.

A request file holds one or more request blocks separated by ``---`` lines.
Each block is a YAML (or JSON) mapping::

    method: POST
    url: example.com/api/users?page=1
    headers:
      Content-Type: application/json
      Accept: [application/json, text/plain]
      Authorization: Basic alice secret
    body: |
      {"name": "alice"}

``body_file`` may be given instead of ``body`` to send a file's bytes; the
path is resolved relative to the request file.

Blocks are split on bare ``---`` lines before any YAML is read, so such a
line cannot appear inside a block, not even in a ``body: |`` literal. Use
``body_file`` for bodies that contain one.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from harsnip.exceptions import RequestParseError
from harsnip.har.models import HTTPRequest
from harsnip.logging import get_logger

LOG = get_logger(__name__)

_BLOCK_SEPARATOR = re.compile(r"^---[ \t]*$", re.MULTILINE)


def _header_text(value: Any) -> Any:
    # YAML reads `X-Retry: 3` as an int and `DNT: true` as a bool
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return value


class RequestDocument(BaseModel):
    """Schema of a single request block."""

    model_config = ConfigDict(extra="forbid")

    method: str = Field(default="GET", min_length=1)
    url: str = Field(min_length=1)
    headers: dict[str, str | list[str] | None] = Field(default_factory=dict)
    body: str | None = None
    body_file: str | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def _stringify_header_values(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        stringified: dict[str, Any] = {}
        for name, item in value.items():
            if isinstance(item, list):
                stringified[str(name)] = [_header_text(v) for v in item]
            else:
                stringified[str(name)] = _header_text(item)
        return stringified

    @model_validator(mode="after")
    def _single_body_source(self) -> RequestDocument:
        if self.body is not None and self.body_file is not None:
            raise ValueError("'body' and 'body_file' are mutually exclusive")
        return self


def split_request_blocks(text: str) -> list[str]:
    """Split a request file into its non-empty blocks, in order."""
    return [block for block in _BLOCK_SEPARATOR.split(text) if block.strip()]


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "request"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


class DocumentRequestParser:
    """Parses YAML/JSON request blocks into ``HTTPRequest`` objects."""

    def parse(self, raw_text: str, context_id: str) -> HTTPRequest:
        """Parse one request block.

        Args:
            raw_text: YAML or JSON text of a single block.
            context_id: Path of the file the block came from. ``body_file``
                is resolved relative to its directory.

        Raises:
            RequestParseError: If the text is not valid YAML, does not match
                the request schema, or ``body_file`` cannot be read.
        """
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise RequestParseError(f"Invalid request in {context_id}: {exc}") from exc

        if not isinstance(data, dict):
            raise RequestParseError(f"Request in {context_id} must be a mapping")

        try:
            document = RequestDocument.model_validate(data)
        except ValidationError as exc:
            raise RequestParseError(
                f"Invalid request in {context_id}: {_format_validation_error(exc)}"
            ) from exc

        body: str | bytes | None = document.body
        raw_body: str | None = None
        if document.body_file is not None:
            body_path = Path(context_id).parent / document.body_file
            try:
                body = body_path.read_bytes()
            except OSError as exc:
                raise RequestParseError(f"Cannot read body file {body_path}: {exc}") from exc
            raw_body = body.decode("utf-8", errors="replace")

        request = HTTPRequest.from_mapping(
            method=document.method,
            url=document.url,
            headers=document.headers,
            body=body,
            raw_body=raw_body,
        )
        LOG.debug("request_parsed", context_id=context_id, method=request.method)
        return request
