"""Constants for hearth-access.

Key patterns and header names shared by the rate limiter, the counting
store adapters and the API adapter.
"""

from typing import Final


class RateLimitKeys:
    """Counting key patterns.

    Every key is stored under ``NAMESPACE`` and the remainder is opaque to
    the counting store; only the rate limiter interprets the structure.
    """

    NAMESPACE: Final[str] = "ratelimit:"
    USER: Final[str] = "user:{user_id}:{action}"
    CHANNEL: Final[str] = "channel:{channel_id}:{user_id}:{action}"
    IP: Final[str] = "ip:{ip}:{action}"
    SLOWMODE: Final[str] = "slowmode:{channel_id}:{user_id}"


class RateLimitHeaders:
    """Response header names for rate-limit introspection."""

    LIMIT: Final[str] = "X-RateLimit-Limit"
    REMAINING: Final[str] = "X-RateLimit-Remaining"
    RESET: Final[str] = "X-RateLimit-Reset"
    RETRY_AFTER: Final[str] = "Retry-After"


class StoreDefaults:
    """Defaults for counting store adapters."""

    KEY_PREFIX: Final[str] = "hearth:"
    REDIS_POOL_SIZE: Final[int] = 10
    REDIS_SOCKET_TIMEOUT_SECONDS: Final[float] = 0.5
    MEMORY_MAX_ENTRIES: Final[int] = 10000
    MEMORY_SWEEP_INTERVAL: Final[int] = 1000


UPGRADE_URL: Final[str] = "/settings/premium"
BYTES_PER_MB: Final[int] = 1024 * 1024
