"""Access feature for hearth-access.

Combines permission resolution, rate limiting and quota checks into the
authorization flow of a single chat request.
"""

from .services import AccessContext, AccessGuard, build_context, create_access_guard

__all__ = [
    "AccessContext",
    "AccessGuard",
    "build_context",
    "create_access_guard",
]
