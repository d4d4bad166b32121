"""Access services."""

from .access_guard import AccessContext, AccessGuard, build_context, create_access_guard

__all__ = [
    "AccessContext",
    "AccessGuard",
    "build_context",
    "create_access_guard",
]
