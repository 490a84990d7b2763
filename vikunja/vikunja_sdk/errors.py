#!/usr/bin/env python3
"""
Vikunja SDK Exception Classes

Custom exception hierarchy for Vikunja API errors.

Every failure (HTTP error status, network failure, unreadable response) is
raised as a VikunjaError. Subclasses only tell the status-code bucket apart.
"""

from typing import Any, Dict, Optional


class VikunjaError(Exception):
    """Base exception for Vikunja client errors"""

    def __init__(
        self,
        message: str,
        endpoint: str = "",
        method: str = "",
        status_code: int = 0,
        code: int = 0,
        response: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.method = method
        self.status_code = status_code
        self.code = code
        self.response = response if response is not None else {}

    @property
    def status(self) -> int:
        """HTTP status of the failed response (0 for network failures)."""
        return self.status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"method={self.method!r}, endpoint={self.endpoint!r}, "
            f"status_code={self.status_code}, code={self.code})"
        )


class VikunjaAuthenticationError(VikunjaError):
    """Raised when authentication or authorization fails (401, 403)"""

    pass


class VikunjaNotFoundError(VikunjaError):
    """Raised when resource is not found (404)"""

    pass


class VikunjaValidationError(VikunjaError):
    """Raised when request parameters are invalid (400, 422)"""

    pass


class VikunjaServerError(VikunjaError):
    """Raised when server returns 5xx error"""

    pass


def error_class_for_status(status_code: int) -> type:
    """Pick the exception class for an HTTP status code."""
    if status_code in (401, 403):
        return VikunjaAuthenticationError
    if status_code == 404:
        return VikunjaNotFoundError
    if status_code in (400, 422):
        return VikunjaValidationError
    if status_code >= 500:
        return VikunjaServerError
    return VikunjaError


def error_for_status(
    message: str,
    endpoint: str,
    method: str,
    status_code: int,
    code: int = 0,
    response: Optional[Dict[str, Any]] = None,
) -> VikunjaError:
    """
    Build the VikunjaError subclass matching an HTTP status code.

    Args:
        message: Human-readable error message
        endpoint: API endpoint that failed (e.g. '/tasks/42')
        method: HTTP method of the failed request
        status_code: HTTP status of the response
        code: Vikunja error code from the response body (0 if absent)
        response: Parsed error body

    Returns:
        Exception instance, ready to raise
    """
    error_cls = error_class_for_status(status_code)
    return error_cls(
        message,
        endpoint=endpoint,
        method=method,
        status_code=status_code,
        code=code,
        response=response,
    )


# Type guards


def is_vikunja_error(error: Any) -> bool:
    return isinstance(error, VikunjaError)


def is_authentication_error(error: Any) -> bool:
    return isinstance(error, VikunjaAuthenticationError)


def is_not_found_error(error: Any) -> bool:
    return isinstance(error, VikunjaNotFoundError)


def is_validation_error(error: Any) -> bool:
    return isinstance(error, VikunjaValidationError)


def is_server_error(error: Any) -> bool:
    return isinstance(error, VikunjaServerError)
