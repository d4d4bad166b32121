"""Permission bit definitions for hearth-access.

Permissions are a 64-bit flag set. Bits are grouped by area with gaps left
for growth; ``ADMINISTRATOR`` sits at bit 62 so every mask still fits a
signed 64-bit database column.
"""

from enum import IntFlag
from typing import List


class Permissions(IntFlag):
    """Capability bits held by a role or granted/denied by an override."""

    # General
    VIEW_CHANNELS = 1 << 0
    MANAGE_CHANNELS = 1 << 1
    MANAGE_ROLES = 1 << 2
    MANAGE_EMOJI = 1 << 3
    VIEW_AUDIT_LOG = 1 << 4
    MANAGE_WEBHOOKS = 1 << 5
    MANAGE_SERVER = 1 << 6

    # Membership
    CREATE_INVITE = 1 << 10
    CHANGE_NICKNAME = 1 << 11
    MANAGE_NICKNAMES = 1 << 12
    KICK_MEMBERS = 1 << 13
    BAN_MEMBERS = 1 << 14
    TIMEOUT_MEMBERS = 1 << 15

    # Text
    SEND_MESSAGES = 1 << 20
    SEND_MESSAGES_IN_THREADS = 1 << 21
    CREATE_PUBLIC_THREADS = 1 << 22
    CREATE_PRIVATE_THREADS = 1 << 23
    SEND_TTS = 1 << 24
    MANAGE_MESSAGES = 1 << 25
    MANAGE_THREADS = 1 << 26
    EMBED_LINKS = 1 << 27
    ATTACH_FILES = 1 << 28
    READ_MESSAGE_HISTORY = 1 << 29
    MENTION_EVERYONE = 1 << 30
    USE_EXTERNAL_EMOJI = 1 << 31
    USE_EXTERNAL_STICKERS = 1 << 32
    ADD_REACTIONS = 1 << 33
    USE_SLASH_COMMANDS = 1 << 34

    # Voice
    CONNECT = 1 << 40
    SPEAK = 1 << 41
    VIDEO = 1 << 42
    USE_VOICE_ACTIVITY = 1 << 43
    PRIORITY_SPEAKER = 1 << 44
    MUTE_MEMBERS = 1 << 45
    DEAFEN_MEMBERS = 1 << 46
    MOVE_MEMBERS = 1 << 47
    USE_SOUNDBOARD = 1 << 48

    # Absolute override of every check, including channel overrides
    ADMINISTRATOR = 1 << 62


# Every permission except ADMINISTRATOR
PERMISSION_ALL: int = 0
for _perm in Permissions:
    if _perm is not Permissions.ADMINISTRATOR:
        PERMISSION_ALL |= _perm.value
del _perm

# Full set handed to owners and administrators
FULL_PERMISSIONS: int = PERMISSION_ALL | Permissions.ADMINISTRATOR.value

# @everyone role on a freshly created server
DEFAULT_PERMISSIONS: int = (
    Permissions.VIEW_CHANNELS
    | Permissions.CREATE_INVITE
    | Permissions.CHANGE_NICKNAME
    | Permissions.SEND_MESSAGES
    | Permissions.SEND_MESSAGES_IN_THREADS
    | Permissions.CREATE_PUBLIC_THREADS
    | Permissions.EMBED_LINKS
    | Permissions.ATTACH_FILES
    | Permissions.READ_MESSAGE_HISTORY
    | Permissions.ADD_REACTIONS
    | Permissions.USE_EXTERNAL_EMOJI
    | Permissions.USE_SLASH_COMMANDS
    | Permissions.CONNECT
    | Permissions.SPEAK
    | Permissions.VIDEO
    | Permissions.USE_VOICE_ACTIVITY
).value


def has_permission(mask: int, permission: int) -> bool:
    """Check if a permission mask grants ``permission``.

    This is the single gate every privileged operation goes through:
    administrators hold every permission regardless of the other bits.
    """
    if mask & Permissions.ADMINISTRATOR:
        return True
    return mask & permission != 0


def describe_permissions(mask: int) -> List[str]:
    """List the names of the known permission bits set in ``mask``."""
    return [perm.name for perm in Permissions if mask & perm.value]
