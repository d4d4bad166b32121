"""Rate limit introspection result."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ....config.constants import RateLimitHeaders


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate limit information for responses.

    ``reset_at`` is a unix timestamp in seconds.
    """

    limit: int
    remaining: int
    reset_at: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_headers(self) -> Dict[str, str]:
        """Render as ``X-RateLimit-*`` response headers."""
        return {
            RateLimitHeaders.LIMIT: str(self.limit),
            RateLimitHeaders.REMAINING: str(self.remaining),
            RateLimitHeaders.RESET: str(self.reset_at),
        }
