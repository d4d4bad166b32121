"""Rate limit response headers."""

from typing import Dict, Optional

from ..config.constants import RateLimitHeaders
from ..features.rate_limiting.entities.info import RateLimitInfo


def rate_limit_headers(info: RateLimitInfo) -> Dict[str, str]:
    """Return ``X-RateLimit-*`` headers for ``info``."""
    return info.to_headers()


def retry_after_headers(exception: Exception) -> Optional[Dict[str, str]]:
    """Return a ``Retry-After`` header if ``exception`` carries a retry delay."""
    retry_after = getattr(exception, "retry_after", None)
    if not retry_after:
        return None
    return {RateLimitHeaders.RETRY_AFTER: str(retry_after)}
