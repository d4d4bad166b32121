"""Channel permission override entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Hashable


class OverrideTarget(str, Enum):
    """What a channel override applies to."""
    ROLE = "role"
    USER = "user"


@dataclass(frozen=True)
class PermissionOverride:
    """Channel-scoped allow/deny adjustment for a role or a single user.

    Allow and deny are expected to be disjoint. When they are not, the
    resolver still applies deny first and allow second, so overlapping bits
    end up granted.
    """

    channel_id: Hashable
    target_type: OverrideTarget
    target_id: Hashable
    allow: int = 0
    deny: int = 0

    def __post_init__(self):
        if not isinstance(self.target_type, OverrideTarget):
            object.__setattr__(self, "target_type", OverrideTarget(self.target_type))

    @property
    def overlapping_bits(self) -> int:
        """Bits present in both allow and deny."""
        return self.allow & self.deny

    def targets_role(self, role_id: Hashable) -> bool:
        return self.target_type is OverrideTarget.ROLE and self.target_id == role_id

    def targets_user(self, user_id: Hashable) -> bool:
        return self.target_type is OverrideTarget.USER and self.target_id == user_id

    def apply(self, mask: int) -> int:
        """Apply this override: deny strictly subtracts, then allow adds."""
        return (mask & ~self.deny) | self.allow
