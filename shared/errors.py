"""
Unified Error Handling for the Appwrite client and the seeding scripts.

This module provides error categories, the exceptions raised by the Appwrite
facade, HTTP status code mapping, and centralized error logging with
structured context.

Usage:
    from shared.errors import ErrorCategory, get_error_logger

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.EXTERNAL_API_ERROR,
        context={"phase": "reset"},
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any


logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    REQUEST ERRORS (caused by what we sent):
    - VALIDATION_ERROR: Payload rejected by the backend schema
    - NOT_FOUND_ERROR: Database, collection, bucket or document not found
    - PERMISSION_ERROR: API key lacks the required scope

    SYSTEM ERRORS:
    - EXTERNAL_API_ERROR: Appwrite or image host failures
    - CONFIGURATION_ERROR: Missing or invalid configuration
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    # Request errors
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND_ERROR = "not_found_error"
    PERMISSION_ERROR = "permission_error"

    # System errors
    EXTERNAL_API_ERROR = "external_api_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


# HTTP status code to ErrorCategory mapping
STATUS_TO_CATEGORY: dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION_ERROR,
    401: ErrorCategory.PERMISSION_ERROR,
    403: ErrorCategory.PERMISSION_ERROR,
    404: ErrorCategory.NOT_FOUND_ERROR,
    409: ErrorCategory.VALIDATION_ERROR,
    429: ErrorCategory.EXTERNAL_API_ERROR,
    500: ErrorCategory.UNEXPECTED_ERROR,
    502: ErrorCategory.EXTERNAL_API_ERROR,
    503: ErrorCategory.EXTERNAL_API_ERROR,
    504: ErrorCategory.EXTERNAL_API_ERROR,
}


def map_status_to_category(status_code: int) -> ErrorCategory:
    """Map HTTP status code to ErrorCategory.

    Args:
        status_code: HTTP status code

    Returns:
        Corresponding ErrorCategory
    """
    return STATUS_TO_CATEGORY.get(status_code, ErrorCategory.UNEXPECTED_ERROR)


class ConfigurationError(Exception):
    """Raised when required settings are missing."""

    category = ErrorCategory.CONFIGURATION_ERROR

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required settings: {', '.join(missing)}")


class AppwriteAPIError(Exception):
    """Error response returned by the Appwrite REST API.

    Appwrite error bodies look like
    ``{"message": ..., "code": 404, "type": "document_not_found", "version": ...}``.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: str | None = None,
        *,
        method: str | None = None,
        path: str | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.method = method
        self.path = path
        super().__init__(f"Appwrite {status_code} ({error_type or 'unknown'}): {message}")

    @property
    def category(self) -> ErrorCategory:
        return map_status_to_category(self.status_code)


class ErrorLogger:
    """Centralized error logging with structured context.

    Provides consistent error logging with full context including the
    failing operation, seeding phase, and stack traces.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: Exception,
        category: ErrorCategory,
        *,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
        exc_info: bool = True,
    ) -> str:
        """Log error with full structured context.

        Args:
            error: The exception that occurred
            category: Error category for classification
            operation: Optional description of the failing operation
            context: Additional context data
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        log_ref = self._generate_log_ref()

        log_data = {
            "log_ref": log_ref,
            "error_category": category.value,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "operation": operation,
            "context": context or {},
            "timestamp": datetime.now(UTC).isoformat(),
        }

        # Log with appropriate level based on category
        if category in [
            ErrorCategory.EXTERNAL_API_ERROR,
            ErrorCategory.CONFIGURATION_ERROR,
            ErrorCategory.UNEXPECTED_ERROR,
        ]:
            self.logger.error(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )
        else:
            self.logger.warning(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )

        return log_ref


def categorize_exception(error: Exception) -> ErrorCategory:
    """Pick the ErrorCategory for an arbitrary exception."""
    category = getattr(error, "category", None)
    if isinstance(category, ErrorCategory):
        return category
    return ErrorCategory.UNEXPECTED_ERROR


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger
