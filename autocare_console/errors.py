"""
Error handling utilities shared by the service layer and the pages.
"""
import enum
import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional

from autocare_console.api_client import ApiError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Generic failure raised by a service function after logging the cause."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationFailed(Exception):
    """Raised when a submitted form does not pass its checks."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class ErrorType(str, enum.Enum):
    """Error category enumeration."""
    NETWORK = "network"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    SERVER = "server"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    CLIENT = "client"
    UNKNOWN = "unknown"


@dataclass
class StandardError:
    type: ErrorType
    message: str
    code: Optional[int] = None
    details: Any = None
    original_error: Optional[BaseException] = None


_STATUS_ERRORS = {
    400: (ErrorType.VALIDATION, "The request was invalid. Please check your input and try again."),
    401: (ErrorType.AUTHENTICATION, "You are not authenticated. Please log in and try again."),
    403: (ErrorType.AUTHORIZATION, "You do not have permission to perform this action."),
    404: (ErrorType.NOT_FOUND, "The requested resource was not found."),
    408: (ErrorType.TIMEOUT, "The request timed out. Please try again later."),
}

_SERVER_STATUSES = {500, 501, 502, 503, 504}


def format_api_error(error: BaseException) -> StandardError:
    """Classify an exception into a ``StandardError`` with a user-facing message."""
    if isinstance(error, ApiError):
        if not error.has_response:
            return StandardError(
                type=ErrorType.NETWORK,
                message="Network error. Please check your connection and try again.",
                original_error=error,
            )

        status_code = error.status_code
        if status_code in _STATUS_ERRORS:
            error_type, message = _STATUS_ERRORS[status_code]
            # Only validation failures carry the body back to the caller
            details = error.data if status_code == 400 else None
            return StandardError(error_type, message, status_code, details, error)

        if status_code in _SERVER_STATUSES:
            return StandardError(
                type=ErrorType.SERVER,
                message="A server error occurred. Please try again later.",
                code=status_code,
                details=error.data,
                original_error=error,
            )

        return StandardError(
            type=ErrorType.UNKNOWN,
            message="An unknown error occurred. Please try again later.",
            code=status_code,
            details=error.data,
            original_error=error,
        )

    if isinstance(error, ValidationFailed):
        return StandardError(
            type=ErrorType.VALIDATION,
            message=str(error) or "Validation error. Please check your input and try again.",
            details=error.errors,
            original_error=error,
        )

    return StandardError(
        type=ErrorType.UNKNOWN,
        message=str(error) or "An unknown error occurred.",
        original_error=error,
    )


def handle_error(
    error: BaseException,
    context: str = "",
    log_level: int = logging.ERROR,
) -> StandardError:
    """Format ``error``, log it and return the formatted version."""
    formatted = format_api_error(error)
    prefix = f"[{context}] " if context else ""
    logger.log(log_level, "%s%s", prefix, formatted.message, exc_info=error)
    return formatted


def user_friendly_message(error: Any) -> str:
    if isinstance(error, StandardError):
        return error.message
    return format_api_error(error).message


def with_error_handling(context: str = "", log_level: int = logging.ERROR):
    """Decorator: log any failure through ``handle_error`` and re-raise it."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                handle_error(e, context=context, log_level=log_level)
                raise

        return wrapper

    return decorator


def error_message(error: BaseException, fallback: str) -> str:
    """
    Message to show on a form after a failed submit.

    Prefers the ``message`` the backend put in its response body.
    """
    cause = error
    if isinstance(error, ServiceError) and isinstance(error.__cause__, ApiError):
        cause = error.__cause__

    if isinstance(cause, ApiError) and isinstance(cause.data, dict):
        message = cause.data.get("message")
        if message:
            return str(message)

    return fallback

