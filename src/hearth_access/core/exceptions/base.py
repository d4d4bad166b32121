"""Base exceptions for hearth-access.

This module defines the base exception hierarchy for the hearth-access library.
All exceptions inherit from HearthAccessError and include error codes, details,
and HTTP status code mappings for API responses.
"""

from typing import Any, Dict, Optional


class HearthAccessError(Exception):
    """Base exception for all hearth-access errors.

    All exceptions in the hearth-access library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: HearthAccessError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Quota errors already know their client-facing shape and render
    themselves; everything else uses the generic envelope.

    Args:
        exception: The hearth-access exception

    Returns:
        Error response dictionary
    """
    to_dict = getattr(exception, "to_dict", None)
    if callable(to_dict):
        return to_dict()

    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
