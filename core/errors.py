"""Error types raised while handling a generation request."""

from __future__ import annotations


class LoveNoteError(Exception):
    """Base class for all love note errors."""

    status_code: int = 500


class ValidationError(LoveNoteError):
    """The request itself is unacceptable (wrong method, malformed body)."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthorizationError(LoveNoteError):
    status_code = 401


class ConfigurationError(LoveNoteError):
    """Server-side configuration is missing or invalid."""

    status_code = 500


class UpstreamError(LoveNoteError):
    """The generation API could not produce usable text.

    Never surfaced to callers: the request handler substitutes fallback text.
    """

    kind: str = "upstream"


class UpstreamTimeoutError(UpstreamError):
    kind = "timeout"


class UpstreamTransportError(UpstreamError):
    kind = "transport"


class UpstreamStatusError(UpstreamError):
    kind = "status"

    def __init__(self, upstream_status: int, body: object = None) -> None:
        super().__init__(f"Generation API returned HTTP {upstream_status}")
        self.upstream_status = upstream_status
        self.body = body


class UnparseableResponseError(UpstreamError):
    kind = "unparseable"


class EmptyResponseError(UpstreamError):
    kind = "empty"
