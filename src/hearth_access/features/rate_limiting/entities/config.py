"""Rate limit configuration and the predefined platform policies."""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Final, Union

from ....core.exceptions import ValidationError


@dataclass(frozen=True)
class RateLimitConfig:
    """At most ``limit`` requests per fixed ``window``.

    ``window`` also accepts a number of seconds.
    """

    limit: int
    window: timedelta

    def __post_init__(self):
        if isinstance(self.window, (int, float)):
            object.__setattr__(self, "window", timedelta(seconds=self.window))

        if self.limit <= 0:
            raise ValidationError(f"Rate limit must be positive, got: {self.limit}")
        if self.window <= timedelta(0):
            raise ValidationError(f"Rate limit window must be positive, got: {self.window}")

    @property
    def window_seconds(self) -> int:
        """Window length in whole seconds, rounded up."""
        return math.ceil(self.window.total_seconds())

    @classmethod
    def per_seconds(cls, limit: int, seconds: Union[int, float]) -> "RateLimitConfig":
        return cls(limit=limit, window=timedelta(seconds=seconds))


class RateLimitPolicies:
    """Standard rate limit configurations."""

    # API rate limits
    API_DEFAULT: Final[RateLimitConfig] = RateLimitConfig(limit=100, window=timedelta(minutes=1))
    API_AUTH: Final[RateLimitConfig] = RateLimitConfig(limit=5, window=timedelta(minutes=1))
    API_UPLOAD: Final[RateLimitConfig] = RateLimitConfig(limit=10, window=timedelta(minutes=1))

    # Message rate limits
    MESSAGE_SEND: Final[RateLimitConfig] = RateLimitConfig(limit=5, window=timedelta(seconds=5))
    MESSAGE_EDIT: Final[RateLimitConfig] = RateLimitConfig(limit=10, window=timedelta(minutes=1))
    MESSAGE_REACTION: Final[RateLimitConfig] = RateLimitConfig(limit=20, window=timedelta(minutes=1))

    # Server rate limits
    SERVER_CREATE: Final[RateLimitConfig] = RateLimitConfig(limit=10, window=timedelta(hours=1))
    INVITE_CREATE: Final[RateLimitConfig] = RateLimitConfig(limit=10, window=timedelta(minutes=1))
