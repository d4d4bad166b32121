"""HTTP status code mapping for exceptions.

Exceptions that know their own status (quota errors) expose a
``status_code`` attribute; everything else is resolved through the static
map below by walking the exception's MRO, so subclasses inherit the status
of their closest mapped ancestor.
"""

from typing import Dict, Optional, Type

from .base import HearthAccessError
from .domain import (
    AuthorizationError,
    ConfigurationError,
    PermissionDeniedError,
    RoleHierarchyError,
    ValidationError,
    ValueOutOfRangeError,
)
from .infrastructure import (
    CounterNotFoundError,
    CounterStoreConnectionError,
    CounterStoreError,
    CounterStoreTimeoutError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    ValueOutOfRangeError: 400,

    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,
    RoleHierarchyError: 403,

    # 404 Not Found
    CounterNotFoundError: 404,

    # 500 Internal Server Error
    ConfigurationError: 500,

    # 503 Service Unavailable
    CounterStoreError: 503,
    CounterStoreConnectionError: 503,
    CounterStoreTimeoutError: 503,

    # Default for HearthAccessError
    HearthAccessError: 500,
}


class HttpStatusMapper:
    """Exception-to-status-code mapper with per-instance overrides."""

    def __init__(self, overrides: Optional[Dict[Type[Exception], int]] = None):
        self._map = {**HTTP_STATUS_MAP, **(overrides or {})}
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception."""
        explicit = getattr(exception, "status_code", None)
        if isinstance(explicit, int):
            return explicit

        exc_type = type(exception)
        if exc_type in self._cache:
            return self._cache[exc_type]

        status_code = 500
        for klass in exc_type.__mro__:
            if klass in self._map:
                status_code = self._map[klass]
                break

        self._cache[exc_type] = status_code
        return status_code


_default_mapper = HttpStatusMapper()


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the default mapper."""
    return _default_mapper.get_status_code(exception)
