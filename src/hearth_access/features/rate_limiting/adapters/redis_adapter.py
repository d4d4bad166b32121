"""Redis counting store for hearth-access."""

import logging
from datetime import timedelta
from typing import Optional, Union

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from ....config.constants import StoreDefaults
from ....core.exceptions import (
    CounterNotFoundError,
    CounterStoreConnectionError,
    CounterStoreError,
    CounterStoreTimeoutError,
)
from ..entities.protocols import CounterStore

logger = logging.getLogger(__name__)


# INCR and first-hit PEXPIRE in one round-trip. A key that somehow lost its
# TTL gets one again instead of counting forever.
INCREMENT_WITH_EXPIRY_SCRIPT = """
local current = redis.call("INCR", KEYS[1])
if current == 1 or redis.call("PTTL", KEYS[1]) < 0 then
    redis.call("PEXPIRE", KEYS[1], ARGV[1])
end
return current
"""


def _ttl_millis(ttl: timedelta) -> int:
    return max(1, int(ttl.total_seconds() * 1000))


class RedisCounterStore(CounterStore):
    """Fixed-window counters stored in Redis under ``key_prefix``."""

    def __init__(self, client: Redis, key_prefix: str = StoreDefaults.KEY_PREFIX):
        self.redis_client = client
        self.key_prefix = key_prefix
        self._pool: Optional[ConnectionPool] = None

    @classmethod
    def from_url(
        cls,
        redis_url: str,
        pool_size: int = StoreDefaults.REDIS_POOL_SIZE,
        socket_timeout: float = StoreDefaults.REDIS_SOCKET_TIMEOUT_SECONDS,
        key_prefix: str = StoreDefaults.KEY_PREFIX,
    ) -> "RedisCounterStore":
        """Create a store with its own connection pool."""
        pool = ConnectionPool.from_url(
            str(redis_url),
            max_connections=pool_size,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
            health_check_interval=30,
        )
        store = cls(Redis(connection_pool=pool), key_prefix=key_prefix)
        store._pool = pool
        logger.info(f"Redis counting store configured (pool_size={pool_size})")
        return store

    def _make_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def increment_with_expiry(self, key: str, ttl: timedelta) -> int:
        full_key = self._make_key(key)
        try:
            count = await self.redis_client.eval(
                INCREMENT_WITH_EXPIRY_SCRIPT, 1, full_key, _ttl_millis(ttl)
            )
            return int(count)
        except RedisTimeoutError as e:
            raise CounterStoreTimeoutError(f"Redis increment timed out for key {full_key}: {e}")
        except RedisConnectionError as e:
            raise CounterStoreConnectionError(f"Redis unreachable for key {full_key}: {e}")
        except RedisError as e:
            raise CounterStoreError(f"Redis increment error for key {full_key}: {e}")

    async def get(self, key: str) -> Union[bytes, str]:
        full_key = self._make_key(key)
        try:
            value = await self.redis_client.get(full_key)
        except RedisTimeoutError as e:
            raise CounterStoreTimeoutError(f"Redis get timed out for key {full_key}: {e}")
        except RedisConnectionError as e:
            raise CounterStoreConnectionError(f"Redis unreachable for key {full_key}: {e}")
        except RedisError as e:
            raise CounterStoreError(f"Redis get error for key {full_key}: {e}")

        if value is None:
            raise CounterNotFoundError(f"Counter not found: {full_key}", details={"key": full_key})
        return value

    async def ping(self) -> bool:
        """Health check; never raises."""
        try:
            return bool(await self.redis_client.ping())
        except RedisError as e:
            logger.warning(f"Redis counting store ping failed: {e}")
            return False

    async def close(self) -> None:
        """Close the client and the pool this store created."""
        await self.redis_client.aclose()
        if self._pool is not None:
            await self._pool.disconnect()
            self._pool = None
        logger.info("Redis counting store closed")
