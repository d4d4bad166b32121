"""Permission services package."""

from .resolver import PermissionResolver, resolve_permissions

__all__ = ["PermissionResolver", "resolve_permissions"]
