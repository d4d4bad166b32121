"""Counting store protocol.

The rate limiter depends on this capability only. Implementations own
atomicity and expiry; the limiter adds no locking of its own.
"""

from abc import abstractmethod
from datetime import timedelta
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class CounterStore(Protocol):
    """Key/value counter with per-key expiry."""

    @abstractmethod
    async def increment_with_expiry(self, key: str, ttl: timedelta) -> int:
        """Atomically increment ``key`` and return the new count.

        A missing or expired key starts again at 1 with a fresh ``ttl``;
        an existing key keeps the expiry set by its first increment.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> Union[bytes, str]:
        """Return the stored value.

        Raises:
            CounterNotFoundError: if the key is absent or expired
        """
        ...
