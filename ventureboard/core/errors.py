"""Checklist exceptions and error classification utilities."""

from enum import Enum

from pydantic import BaseModel


class ChecklistError(Exception):
    """Base class for checklist engine errors."""


class NotFoundError(ChecklistError):
    """A business or task id did not resolve."""


class ValidationError(ChecklistError):
    """A mutating call is missing a required field."""


class StorageError(ChecklistError):
    """The backing store could not be read or written."""


class ErrorCategory(Enum):
    """Categories of errors that can occur while executing a checklist command."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    STORAGE = "storage"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_BUSINESS_NOT_FOUND = "ERR_BUSINESS_NOT_FOUND"
    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_VALIDATION = "ERR_VALIDATION"
    ERR_STORAGE = "ERR_STORAGE"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error(exception: Exception) -> ErrorCategory:
    """Map an exception onto an error category."""
    if isinstance(exception, StorageError):
        return ErrorCategory.STORAGE
    if isinstance(exception, ValidationError):
        return ErrorCategory.VALIDATION
    if isinstance(exception, NotFoundError | KeyError):
        return ErrorCategory.NOT_FOUND
    return ErrorCategory.UNKNOWN


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised during command execution

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    category = classify_error(exception)
    error_str = str(exception).strip("'\"")

    if category == ErrorCategory.STORAGE:
        return ErrorResponse(
            code=ErrorCode.ERR_STORAGE,
            message=f"Checklist storage failed: {error_str}",
            suggestion="Check that the checklist file exists, is valid JSON and is writable.",
            severity=ErrorSeverity.CRITICAL,
        )

    if category == ErrorCategory.VALIDATION:
        return ErrorResponse(
            code=ErrorCode.ERR_VALIDATION,
            message=error_str or "Invalid request.",
            suggestion="Provide the missing field and try again.",
            severity=ErrorSeverity.LOW,
        )

    if category == ErrorCategory.NOT_FOUND:
        is_business = "business" in error_str.lower()
        return ErrorResponse(
            code=ErrorCode.ERR_BUSINESS_NOT_FOUND if is_business else ErrorCode.ERR_TASK_NOT_FOUND,
            message=error_str or "Not found.",
            suggestion=(
                "Use the 'businesses' action to see known businesses."
                if is_business
                else "Use the 'list' action to see task ids."
            ),
            severity=ErrorSeverity.LOW,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again. If the problem persists, check the logs.",
        severity=ErrorSeverity.MEDIUM,
    )
