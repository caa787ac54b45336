"""Custom exception classes for the search proxy.

None of these are turned into a response body here; they abort the
invocation and the Lambda runtime reports them.
"""

from __future__ import annotations

from typing import Optional
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osusearch.services.secrets import SecretErrorKind


class AppError(Exception):
    """Base exception for application errors.

    Attributes:
        message: Human-readable error message.
        detail: Optional additional context.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(AppError):
    """Raised when the inbound event is missing a required value."""

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, detail=detail)
        self.field = field


class ConfigurationError(AppError):
    """Raised when a configuration value is missing or malformed."""

    def __init__(self, config_name: str):
        super().__init__(f"Invalid or missing configuration: {config_name}")
        self.config_name = config_name


class SecretRetrievalError(AppError):
    """Raised when a fetched secret carries no usable bearer token.

    Secret store failures themselves propagate as the boto exception;
    this covers an empty, non-JSON or token-less payload. The decoding
    error is kept as ``__cause__``.

    Attributes:
        kind: Classified failure kind.
        code: Name of the decoding failure.
    """

    def __init__(self, kind: SecretErrorKind, code: str):
        super().__init__(
            f"Secret retrieval failed: {code}",
            detail=kind.diagnostic,
        )
        self.kind = kind
        self.code = code


class UpstreamRequestError(AppError):
    """Raised when the upstream API call or its decoding fails."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
