"""Value objects consumed by the permission resolver.

These are plain, immutable snapshots built per request by the persistence
layer. The resolver never mutates them and never loads anything itself.
Identifiers are opaque; the platform uses ``uuid.UUID``.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, Tuple

from ....core.exceptions import ValidationError


@dataclass(frozen=True)
class Server:
    """Server identity and its owner, a super-actor independent of roles."""

    id: Hashable
    owner_id: Hashable


@dataclass(frozen=True)
class Role:
    """Server role carrying a permission mask.

    ``position`` orders roles for hierarchy checks only; it never affects
    how masks are combined. The default (@everyone) role shares the
    server's identifier.
    """

    id: Hashable
    server_id: Hashable
    permissions: int = 0
    position: int = 0
    is_default: bool = False
    name: str = ""

    def __post_init__(self):
        if self.permissions < 0 or self.permissions.bit_length() > 63:
            raise ValidationError(
                f"Role permissions must fit a signed 64-bit mask, got: {self.permissions}"
            )

    def is_default_for(self, server: Server) -> bool:
        """Check if this is the @everyone role of ``server``."""
        return self.id == server.id


@dataclass(frozen=True)
class Member:
    """Server membership with its explicitly assigned roles.

    The default role is implicit and never listed in ``roles``.
    """

    user_id: Hashable
    server_id: Hashable
    roles: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists from the persistence layer are frozen into tuples
        if not isinstance(self.roles, tuple):
            object.__setattr__(self, "roles", tuple(self.roles))

    def has_role(self, role_id: Hashable) -> bool:
        """Check if the member is explicitly assigned ``role_id``."""
        return role_id in self.roles


@dataclass(frozen=True)
class Channel:
    """Channel the action targets."""

    id: Hashable
    server_id: Hashable
    slowmode_seconds: int = 0

    @property
    def has_slowmode(self) -> bool:
        """Whether a per-user cooldown is configured."""
        return self.slowmode_seconds > 0
