"""Permission resolution for server members.

Computes the effective permission mask of a member from the @everyone role,
the member's assigned roles and, when a channel is given, the channel's
overrides. Resolution is pure: identical inputs always produce the same
mask and nothing is loaded or cached here.

Precedence, lowest to highest:

1. union of the @everyone role and every assigned role
2. override targeting the @everyone role
3. overrides targeting the member's roles, in role-list order
4. override targeting the member directly

Owners and administrators short-circuit all of it.
"""

import logging
from typing import Hashable, Iterable, Optional, Sequence, Set

from ....core.exceptions import PermissionDeniedError, RoleHierarchyError
from ..entities.flags import (
    FULL_PERMISSIONS,
    Permissions,
    describe_permissions,
    has_permission,
)
from ..entities.models import Channel, Member, Role, Server
from ..entities.override import PermissionOverride

logger = logging.getLogger(__name__)


def _apply_override(mask: int, override: PermissionOverride) -> int:
    if override.overlapping_bits:
        logger.warning(
            f"Override for {override.target_type.value} {override.target_id} in channel "
            f"{override.channel_id} both allows and denies {describe_permissions(override.overlapping_bits)}; "
            "deny is applied first so the bits end up allowed"
        )
    return override.apply(mask)


def resolve_permissions(
    member: Member,
    roles: Sequence[Role],
    server: Server,
    channel: Optional[Channel] = None,
    overrides: Optional[Iterable[PermissionOverride]] = None,
) -> int:
    """Compute the effective permission mask for ``member``.

    Args:
        member: The acting member
        roles: Every role of the server, @everyone included
        server: The server the member belongs to
        channel: Channel the action targets, None for server-level checks
        overrides: The channel's permission overrides

    Returns:
        Effective permission mask
    """
    if member.user_id == server.owner_id:
        return FULL_PERMISSIONS

    permissions = 0
    for role in roles:
        if role.id == server.id:
            permissions = int(role.permissions)
            break
    else:
        logger.warning(
            f"No @everyone role for server {server.id} in role list; "
            f"resolving member {member.user_id} from zero base permissions"
        )

    assigned: Set[Hashable] = set(member.roles)
    for role in roles:
        if role.id in assigned:
            permissions |= int(role.permissions)

    if permissions & Permissions.ADMINISTRATOR:
        return FULL_PERMISSIONS

    if channel is None or overrides is None:
        return permissions

    override_list = list(overrides)
    channel_overrides = [o for o in override_list if o.channel_id == channel.id]
    if len(channel_overrides) < len(override_list):
        logger.warning(
            f"Ignoring {len(override_list) - len(channel_overrides)} permission overrides "
            f"not belonging to channel {channel.id} while resolving member {member.user_id}"
        )
    if not channel_overrides:
        return permissions

    for override in channel_overrides:
        if override.targets_role(server.id):
            permissions = _apply_override(permissions, override)

    for role in roles:
        if role.id not in assigned or role.id == server.id:
            continue
        for override in channel_overrides:
            if override.targets_role(role.id):
                permissions = _apply_override(permissions, override)

    for override in channel_overrides:
        if override.targets_user(member.user_id):
            permissions = _apply_override(permissions, override)

    return int(permissions)


class PermissionResolver:
    """Resolves effective permissions and enforces them at the call site."""

    def resolve(
        self,
        member: Member,
        roles: Sequence[Role],
        server: Server,
        channel: Optional[Channel] = None,
        overrides: Optional[Iterable[PermissionOverride]] = None,
    ) -> int:
        """Compute the effective permission mask, see ``resolve_permissions``."""
        permissions = resolve_permissions(member, roles, server, channel, overrides)
        logger.debug(
            f"Resolved permissions {permissions:#x} for user {member.user_id} "
            f"in server {server.id}" + (f" channel {channel.id}" if channel else "")
        )
        return permissions

    @staticmethod
    def has_permission(mask: int, permission: int) -> bool:
        """Check a single permission against a resolved mask."""
        return has_permission(mask, permission)

    def require(self, mask: int, permission: int) -> None:
        """Raise ``PermissionDeniedError`` unless ``mask`` grants ``permission``."""
        if not has_permission(mask, permission):
            logger.debug(f"Permission denied: missing {describe_permissions(permission)}")
            raise PermissionDeniedError(
                required=int(permission),
                permission_names=describe_permissions(permission),
            )

    def require_any(self, mask: int, *permissions: int) -> None:
        """Raise ``PermissionDeniedError`` unless ``mask`` grants one of ``permissions``."""
        if any(has_permission(mask, permission) for permission in permissions):
            return

        combined = 0
        for permission in permissions:
            combined |= permission
        raise PermissionDeniedError(
            required=int(combined),
            permission_names=describe_permissions(combined),
            message=f"Missing any of the required permissions: {', '.join(describe_permissions(combined))}",
        )

    def highest_position(self, member: Member, roles: Sequence[Role], server: Server) -> int:
        """Highest role position held by ``member``, @everyone included."""
        assigned = set(member.roles)
        positions = [
            role.position for role in roles
            if role.id in assigned or role.id == server.id
        ]
        return max(positions, default=0)

    def can_manage_role(
        self,
        member: Member,
        roles: Sequence[Role],
        server: Server,
        target_role: Role,
    ) -> bool:
        """Check whether ``member`` may edit, assign or remove ``target_role``.

        Requires MANAGE_ROLES and a highest role strictly above the target.
        Only the owner bypasses the hierarchy; administrators do not.
        """
        if member.user_id == server.owner_id:
            return True

        permissions = self.resolve(member, roles, server)
        if not has_permission(permissions, Permissions.MANAGE_ROLES):
            return False

        return self.highest_position(member, roles, server) > target_role.position

    def ensure_can_manage_role(
        self,
        member: Member,
        roles: Sequence[Role],
        server: Server,
        target_role: Role,
    ) -> None:
        """Raise the matching authorization error if ``can_manage_role`` fails."""
        if member.user_id == server.owner_id:
            return

        permissions = self.resolve(member, roles, server)
        self.require(permissions, Permissions.MANAGE_ROLES)

        actor_position = self.highest_position(member, roles, server)
        if actor_position <= target_role.position:
            raise RoleHierarchyError(actor_position, target_role.position)
