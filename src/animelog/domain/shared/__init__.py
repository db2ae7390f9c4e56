"""Shared domain components used across domain boundaries."""

from animelog.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from animelog.domain.shared.time import utc_now

__all__ = [
    "DomainException",
    "ErrorCode",
    "ExternalServiceError",
    "ValidationError",
    "utc_now",
]
