"""Domain-specific exceptions for hearth-access.

This module defines exceptions that relate to access-control decisions
and to invalid input handed to the engines.
"""

from typing import Any, Dict, List, Optional

from .base import HearthAccessError


# Configuration Errors
class ConfigurationError(HearthAccessError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(HearthAccessError):
    """Raised when input validation fails."""
    pass


class ValueOutOfRangeError(ValidationError):
    """Raised when value is outside allowed range."""
    pass


# Authorization Errors
class AuthorizationError(HearthAccessError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when the effective permission mask lacks a required bit."""

    def __init__(
        self,
        required: int,
        permission_names: Optional[List[str]] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.required = required
        self.permission_names = permission_names or []
        names = ", ".join(self.permission_names) or hex(required)
        super().__init__(
            message or f"Missing required permission: {names}",
            error_code="missing_permission",
            details={
                "required": required,
                "missing_permissions": self.permission_names,
                **(details or {}),
            },
        )


class RoleHierarchyError(AuthorizationError):
    """Raised when an actor tries to manage a role at or above their own."""

    def __init__(self, actor_position: int, target_position: int):
        self.actor_position = actor_position
        self.target_position = target_position
        super().__init__(
            "Cannot modify role higher than your highest role",
            error_code="role_hierarchy",
            details={
                "actor_position": actor_position,
                "target_position": target_position,
            },
        )
