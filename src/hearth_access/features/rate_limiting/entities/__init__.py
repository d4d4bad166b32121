"""Rate limiting entities package."""

from .config import RateLimitConfig, RateLimitPolicies
from .info import RateLimitInfo
from .protocols import CounterStore

__all__ = [
    "RateLimitConfig",
    "RateLimitPolicies",
    "RateLimitInfo",
    "CounterStore",
]
