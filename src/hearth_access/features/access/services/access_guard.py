"""Access guard.

Runs the checks a chat request goes through, in order: permission, then
rate limit and slowmode, then quota ceilings. A permission denial never
consumes rate limit budget.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from ....config.settings import AccessSettings, get_settings
from ....core.exceptions import ValidationError
from ...permissions.entities.flags import Permissions, has_permission
from ...permissions.entities.models import Channel, Member, Role, Server
from ...permissions.entities.override import PermissionOverride
from ...permissions.services.resolver import PermissionResolver
from ...quotas.entities.config import load_quota_config
from ...quotas.services.quota_service import QuotaService
from ...rate_limiting.adapters import MemoryCounterStore, RedisCounterStore
from ...rate_limiting.entities.config import RateLimitConfig, RateLimitPolicies
from ...rate_limiting.entities.protocols import CounterStore
from ...rate_limiting.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

MESSAGE_SEND_ACTION = "message_send"
UPLOAD_ACTION = "upload"

# Holders of either bit are not subject to channel slowmode
SLOWMODE_BYPASS = (Permissions.MANAGE_MESSAGES, Permissions.MANAGE_CHANNELS)


@dataclass(frozen=True)
class AccessContext:
    """Everything needed to resolve one member's permissions."""

    member: Member
    roles: Tuple[Role, ...]
    server: Server
    channel: Optional[Channel] = None
    overrides: Tuple[PermissionOverride, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.roles, tuple):
            object.__setattr__(self, "roles", tuple(self.roles))
        if not isinstance(self.overrides, tuple):
            object.__setattr__(self, "overrides", tuple(self.overrides))

    @property
    def user_id(self):
        return self.member.user_id


class AccessGuard:
    """Authorizes chat actions for a member."""

    def __init__(
        self,
        resolver: PermissionResolver,
        rate_limiter: RateLimiter,
        quota_service: QuotaService,
    ):
        self._resolver = resolver
        self._rate_limiter = rate_limiter
        self._quota_service = quota_service

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    @property
    def quota_service(self) -> QuotaService:
        return self._quota_service

    def resolve(self, context: AccessContext) -> int:
        return self._resolver.resolve(
            context.member,
            context.roles,
            context.server,
            context.channel,
            context.overrides,
        )

    async def authorize(
        self,
        context: AccessContext,
        permission: int,
        *,
        action: Optional[str] = None,
        rate_config: Optional[RateLimitConfig] = None,
    ) -> int:
        """Require ``permission``, then rate limit ``action`` per user.

        Returns the resolved permission mask.

        Raises:
            PermissionDeniedError: if the member lacks ``permission``
            RateLimitedError: if ``action`` is over its rate limit
        """
        mask = self.resolve(context)
        self._resolver.require(mask, permission)

        if action is not None:
            await self._rate_limiter.check_user(
                context.user_id, action, rate_config or RateLimitPolicies.API_DEFAULT
            )
        return mask

    async def authorize_message(
        self,
        context: AccessContext,
        content_length: int,
        *,
        in_thread: bool = False,
    ) -> int:
        """Authorize sending a message of ``content_length`` characters."""
        channel = self._require_channel(context)
        permission = Permissions.SEND_MESSAGES_IN_THREADS if in_thread else Permissions.SEND_MESSAGES

        mask = self.resolve(context)
        self._resolver.require(mask, permission)

        rate_config = self._quota_service.message_rate_config()
        if rate_config is not None:
            await self._rate_limiter.check_user(context.user_id, MESSAGE_SEND_ACTION, rate_config)

        bypass = any(has_permission(mask, bit) for bit in SLOWMODE_BYPASS)
        if channel.has_slowmode and not bypass:
            await self._rate_limiter.check_slowmode(
                context.user_id, channel.id, channel.slowmode_seconds
            )

        self._quota_service.check_message_length(content_length)
        return mask

    async def authorize_upload(
        self,
        context: AccessContext,
        file_size_bytes: int,
        used_bytes: int = 0,
        filename: Optional[str] = None,
    ) -> int:
        """Authorize attaching a file of ``file_size_bytes``."""
        mask = self.resolve(context)
        self._resolver.require(mask, Permissions.ATTACH_FILES)

        await self._rate_limiter.check_user(
            context.user_id, UPLOAD_ACTION, RateLimitPolicies.API_UPLOAD
        )

        if filename:
            self._quota_service.check_file_extension(filename)
        self._quota_service.check_storage_quota(file_size_bytes, used_bytes)
        logger.debug(f"Upload of {file_size_bytes} bytes authorized for user {context.user_id}")
        return mask

    @staticmethod
    def _require_channel(context: AccessContext) -> Channel:
        if context.channel is None:
            raise ValidationError("A channel is required to authorize a message")
        return context.channel


def build_context(
    member: Member,
    roles: Sequence[Role],
    server: Server,
    channel: Optional[Channel] = None,
    overrides: Sequence[PermissionOverride] = (),
) -> AccessContext:
    """Create an ``AccessContext`` from plain sequences."""
    return AccessContext(
        member=member,
        roles=tuple(roles),
        server=server,
        channel=channel,
        overrides=tuple(overrides),
    )


def create_access_guard(
    settings: Optional[AccessSettings] = None,
    store: Optional[CounterStore] = None,
) -> AccessGuard:
    """Create an access guard wired from settings.

    Without an explicit ``store`` a Redis counting store is used when
    ``redis_url`` is configured, and an in-memory one otherwise.
    """
    settings = settings or get_settings()
    if store is None:
        if settings.is_store_configured:
            store = RedisCounterStore.from_url(
                str(settings.redis_url),
                pool_size=settings.redis_pool_size,
                socket_timeout=settings.redis_socket_timeout,
                key_prefix=settings.redis_key_prefix,
            )
        else:
            logger.warning("No Redis URL configured, rate limits are per-process only")
            store = MemoryCounterStore()

    return AccessGuard(
        PermissionResolver(),
        RateLimiter(store),
        QuotaService(load_quota_config(settings)),
    )
