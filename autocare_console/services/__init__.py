"""
Service layer: one function per backend endpoint.

Each function makes a single call through the shared ``ApiClient`` and
forwards the JSON it gets back. Failures are logged and re-raised as a
``ServiceError`` carrying a fixed message; an expired session passes
through untouched so the pages can sign the user out.
"""
import functools
import logging

from pydantic import ValidationError

from autocare_console.api_client import ApiError, SessionExpired
from autocare_console.errors import ServiceError

logger = logging.getLogger(__name__)


def service_call(failure_message: str, log_message: str = ""):
    """Wrap a service function with the log-and-rethrow error handling."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SessionExpired:
                raise
            except ApiError as e:
                logging.getLogger(func.__module__).error(
                    "%s: %s", log_message or failure_message, e
                )
                raise ServiceError(failure_message, status_code=e.status_code) from e
            except ValidationError as e:
                logging.getLogger(func.__module__).error(
                    "%s: unexpected response: %s", log_message or failure_message, e
                )
                raise ServiceError(failure_message) from e

        return wrapper

    return decorator


def as_list(data) -> list:
    """Backend list endpoints return a bare list or a wrapper such as ``content``."""
    if data is None:
        return []
    if isinstance(data, dict):
        for key in ("content", "data", "body", "list"):
            if isinstance(data.get(key), list):
                return data[key]
        return []
    return list(data)


def parse_rows(model, rows, failure_message: str) -> list:
    """Validate backend rows into ``model``, or raise ``ServiceError``."""
    return [parse_row(model, row, failure_message) for row in rows]


def parse_row(model, row, failure_message: str):
    try:
        return model.model_validate(row)
    except ValidationError as e:
        logger.error("Unexpected %s row from the backend: %s", model.__name__, e)
        raise ServiceError(failure_message) from e
