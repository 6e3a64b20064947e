"""Custom exception classes for pagination."""

from typing import Any

from dynpaginate.utils.constants import (
    ERROR_CODE_INVALID_CONFIG,
    ERROR_CODE_PAGE_CHANGE_IN_PROGRESS,
    ERROR_CODE_PAGE_OUT_OF_RANGE,
)


class PaginationError(Exception):
    """
    Base exception for all pagination errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ConfigError(PaginationError):
    """Raised when pagination configuration is malformed."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CONFIG,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class OutOfRangeError(PaginationError):
    """Raised when a requested page lies outside the page range."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PAGE_OUT_OF_RANGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PageChangeInProgressError(PaginationError):
    """Raised when a page change is requested from inside a change notification."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PAGE_CHANGE_IN_PROGRESS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
