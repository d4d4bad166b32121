"""Exceptions module for hearth-access.

This module provides the complete exception hierarchy for hearth-access,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    HearthAccessError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,

    # Validation Errors
    ValidationError,
    ValueOutOfRangeError,

    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,
    RoleHierarchyError,
)

from .infrastructure import (
    # Counter Store Errors
    CounterStoreError,
    CounterStoreConnectionError,
    CounterStoreTimeoutError,
    CounterNotFoundError,
)

from .http_mapping import HTTP_STATUS_MAP, HttpStatusMapper

__all__ = [
    # Base
    "HearthAccessError",
    "get_http_status_code",
    "create_error_response",

    # Domain
    "ConfigurationError",
    "ValidationError",
    "ValueOutOfRangeError",
    "AuthorizationError",
    "PermissionDeniedError",
    "RoleHierarchyError",

    # Infrastructure
    "CounterStoreError",
    "CounterStoreConnectionError",
    "CounterStoreTimeoutError",
    "CounterNotFoundError",

    # HTTP mapping
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
]
