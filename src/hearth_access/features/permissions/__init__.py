"""Permissions feature for hearth-access.

Feature-First layout:
- entities/: permission bits, role/member/server/channel value objects, overrides
- services/: effective-permission resolution and enforcement
"""

from .entities import (
    Permissions,
    PERMISSION_ALL,
    FULL_PERMISSIONS,
    DEFAULT_PERMISSIONS,
    has_permission,
    describe_permissions,
    Server,
    Role,
    Member,
    Channel,
    OverrideTarget,
    PermissionOverride,
)
from .services import PermissionResolver, resolve_permissions

__all__ = [
    "Permissions",
    "PERMISSION_ALL",
    "FULL_PERMISSIONS",
    "DEFAULT_PERMISSIONS",
    "has_permission",
    "describe_permissions",
    "Server",
    "Role",
    "Member",
    "Channel",
    "OverrideTarget",
    "PermissionOverride",
    "PermissionResolver",
    "resolve_permissions",
]
