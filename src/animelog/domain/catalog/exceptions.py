"""Catalog domain exceptions.

These exceptions represent errors from the upstream anime catalog and
map to 5xx HTTP responses when they reach the presentation layer.
"""

from animelog.domain.shared.exceptions import ErrorCode, ExternalServiceError


class CatalogError(ExternalServiceError):
    """Base exception for upstream catalog errors."""


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog cannot be reached or answers with non-2xx.

    Transient by nature: callers may retry it.
    """

    def __init__(
        self,
        message: str = "Anime catalog is currently unavailable",
        status_code: int | None = None,
        path: str | None = None,
    ) -> None:
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if path is not None:
            details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCode.CATALOG_UNAVAILABLE,
            details=details,
        )
        self.status_code = status_code


class CatalogResponseError(CatalogError):
    """Raised when the catalog answers 2xx with a body we cannot parse."""

    def __init__(
        self,
        message: str = "Anime catalog returned an unexpected response",
        path: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CATALOG_BAD_RESPONSE,
            details={"path": path} if path else None,
        )
