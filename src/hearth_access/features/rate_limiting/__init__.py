"""Rate limiting feature.

Fixed-window counters per user, channel, client address and slowmode
cooldown, stored in Redis or in memory.
"""

from .entities import CounterStore, RateLimitConfig, RateLimitInfo, RateLimitPolicies
from .services import RateLimiter, create_rate_limiter
from .adapters import MemoryCounterStore, RedisCounterStore

__all__ = [
    "CounterStore",
    "RateLimitConfig",
    "RateLimitInfo",
    "RateLimitPolicies",
    "RateLimiter",
    "create_rate_limiter",
    "MemoryCounterStore",
    "RedisCounterStore",
]
