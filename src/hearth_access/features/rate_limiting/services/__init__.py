"""Rate limiting services."""

from .rate_limiter import RateLimiter, create_rate_limiter

__all__ = [
    "RateLimiter",
    "create_rate_limiter",
]
