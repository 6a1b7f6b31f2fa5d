"""Custom exceptions for harsnip package."""


class HarsnipError(Exception):
    """Base exception class for all harsnip errors."""


class RequestParseError(HarsnipError):
    """Raised when request text cannot be parsed into an HTTP request."""


class SnippetError(HarsnipError):
    """Raised when a code snippet cannot be generated."""


class SnippetValidationError(SnippetError):
    """Raised when a HAR request does not pass snippet engine validation."""


class UnknownTargetError(SnippetError):
    """Raised when a target or client key is not registered.

    Attributes:
        target: The requested target key.
        client: The requested client key, if any.
    """

    def __init__(self, target: str, client: str | None = None) -> None:
        self.target = target
        self.client = client
        if client is None:
            message = f"Unknown snippet target '{target}'"
        else:
            message = f"Unknown client '{client}' for snippet target '{target}'"
        super().__init__(message)


class SelectorError(HarsnipError):
    """Raised when the target/client selector is misused."""


class NoTargetsError(SelectorError):
    """Raised when a selector is created without any targets."""


class SelectorStateError(SelectorError):
    """Raised when a selector transition is not valid in the current state."""


class PreviewError(HarsnipError):
    """Raised when a generated snippet cannot be previewed."""


class ClipboardError(HarsnipError):
    """Raised when text cannot be written to the system clipboard."""
