"""Permission entities package.

Permission bits and the value objects consumed by the resolver.
"""

from .flags import (
    Permissions,
    PERMISSION_ALL,
    FULL_PERMISSIONS,
    DEFAULT_PERMISSIONS,
    has_permission,
    describe_permissions,
)
from .models import Server, Role, Member, Channel
from .override import OverrideTarget, PermissionOverride

__all__ = [
    # Permission bits
    "Permissions",
    "PERMISSION_ALL",
    "FULL_PERMISSIONS",
    "DEFAULT_PERMISSIONS",
    "has_permission",
    "describe_permissions",

    # Value objects
    "Server",
    "Role",
    "Member",
    "Channel",
    "OverrideTarget",
    "PermissionOverride",
]
