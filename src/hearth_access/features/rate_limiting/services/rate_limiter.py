"""Fixed-window rate limiter over a pluggable counting store.

The limiter fails open: if the counting store errors, the request is
allowed and the failure is logged. A broken store must not take the chat
platform down with it.
"""

import logging
import time
from datetime import timedelta
from typing import Hashable

from ....config.constants import RateLimitKeys
from ....core.exceptions import CounterNotFoundError
from ...quotas.entities.errors import rate_limit_error
from ..entities.config import RateLimitConfig
from ..entities.info import RateLimitInfo
from ..entities.protocols import CounterStore

logger = logging.getLogger(__name__)


class RateLimiter:
    """Counts requests per scope key and rejects the ones over the limit.

    Keys are namespaced under ``ratelimit:``; callers pass the scope part
    (``user:<id>:<action>`` and so on) or use the ``check_*`` helpers.
    """

    def __init__(self, store: CounterStore):
        self._store = store

    @property
    def store(self) -> CounterStore:
        return self._store

    @staticmethod
    def _full_key(scope_key: str) -> str:
        return f"{RateLimitKeys.NAMESPACE}{scope_key}"

    async def check(self, scope_key: str, config: RateLimitConfig) -> None:
        """Count one request against ``scope_key``.

        Raises:
            RateLimitedError: if the count exceeds ``config.limit``
        """
        key = self._full_key(scope_key)
        try:
            count = await self._store.increment_with_expiry(key, config.window)
        except Exception as e:
            logger.warning(f"Rate limit store error for {key}, allowing request: {e}")
            return

        if count > config.limit:
            logger.debug(f"Rate limit exceeded for {key}: {count}/{config.limit}")
            raise rate_limit_error(
                retry_after=config.window_seconds,
                limit=config.limit,
                window_seconds=config.window_seconds,
            )

    async def check_user(self, user_id: Hashable, action: str, config: RateLimitConfig) -> None:
        """Rate limit an action per user."""
        await self.check(RateLimitKeys.USER.format(user_id=user_id, action=action), config)

    async def check_channel(
        self,
        user_id: Hashable,
        channel_id: Hashable,
        action: str,
        config: RateLimitConfig,
    ) -> None:
        """Rate limit an action per user per channel."""
        await self.check(
            RateLimitKeys.CHANNEL.format(channel_id=channel_id, user_id=user_id, action=action),
            config,
        )

    async def check_ip(self, ip: str, action: str, config: RateLimitConfig) -> None:
        """Rate limit an action per client address."""
        await self.check(RateLimitKeys.IP.format(ip=ip, action=action), config)

    async def check_slowmode(
        self,
        user_id: Hashable,
        channel_id: Hashable,
        slowmode_seconds: int,
    ) -> None:
        """Enforce the channel slowmode cooldown for a user.

        The first message in a cooldown sets a marker that lives for
        ``slowmode_seconds``; any message while it exists is rejected.

        Raises:
            RateLimitedError: while the cooldown marker is present
        """
        if slowmode_seconds <= 0:
            return

        key = self._full_key(RateLimitKeys.SLOWMODE.format(channel_id=channel_id, user_id=user_id))
        try:
            await self._store.get(key)
        except CounterNotFoundError:
            try:
                await self._store.increment_with_expiry(key, timedelta(seconds=slowmode_seconds))
            except Exception as e:
                logger.warning(f"Slowmode store error for {key}, allowing message: {e}")
            return
        except Exception as e:
            logger.warning(f"Slowmode store error for {key}, allowing message: {e}")
            return

        logger.debug(f"Slowmode active for {key} ({slowmode_seconds}s)")
        raise rate_limit_error(
            retry_after=slowmode_seconds,
            limit=1,
            window_seconds=slowmode_seconds,
            slowmode_seconds=slowmode_seconds,
        )

    async def get_remaining_requests(self, scope_key: str, config: RateLimitConfig) -> int:
        """Remaining requests in the current window.

        This counts as a request: the counter is incremented.
        """
        key = self._full_key(scope_key)
        try:
            count = await self._store.increment_with_expiry(key, config.window)
        except Exception as e:
            logger.warning(f"Rate limit store error for {key}, reporting full quota: {e}")
            return config.limit

        return max(0, config.limit - count + 1)

    async def get_info(self, scope_key: str, config: RateLimitConfig) -> RateLimitInfo:
        """Rate limit information for response headers.

        ``reset_at`` is an upper bound: now plus a full window.
        """
        remaining = await self.get_remaining_requests(scope_key, config)
        return RateLimitInfo(
            limit=config.limit,
            remaining=remaining,
            reset_at=int(time.time() + config.window.total_seconds()),
        )


def create_rate_limiter(store: CounterStore) -> RateLimiter:
    """Create a rate limiter over ``store``."""
    return RateLimiter(store)
