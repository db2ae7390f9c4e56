"""Shared domain exceptions and error codes.

Every exception the presentation layer turns into an error response
derives from DomainException and carries an ErrorCode.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ANIME_ID = "INVALID_ANIME_ID"

    # Upstream catalog errors
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"
    CATALOG_BAD_RESPONSE = "CATALOG_BAD_RESPONSE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for domain errors.

    Attributes
    ----------
    message
        Text returned to the client as ``detail``
    code
        Returned to the client as ``code``
    details
        Extra context for the log only
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected by a domain rule."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ExternalServiceError(DomainException):
    """Raised when a third-party service fails or misbehaves."""
