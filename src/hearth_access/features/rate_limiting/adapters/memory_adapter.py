"""In-memory counting store for hearth-access.

Single-process implementation of ``CounterStore`` used by tests, local
development and as the fallback when no Redis URL is configured. An expired
entry is discarded the next time its key is touched, and writes sweep every
expired entry once every ``sweep_interval`` writes or whenever the store
reaches ``max_entries``. No background task is started.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Dict, Optional

from ....config.constants import StoreDefaults
from ....core.exceptions import CounterNotFoundError
from ..entities.protocols import CounterStore

logger = logging.getLogger(__name__)


@dataclass
class CounterEntry:
    """Counter value with its absolute expiry on the store clock."""
    count: int
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class MemoryCounterStore(CounterStore):
    """Fixed-window counters held in a dict guarded by an ``asyncio.Lock``."""

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        max_entries: int = StoreDefaults.MEMORY_MAX_ENTRIES,
        sweep_interval: int = StoreDefaults.MEMORY_SWEEP_INTERVAL,
    ):
        if max_entries < 1 or sweep_interval < 1:
            raise ValueError("max_entries and sweep_interval must be positive")
        self._clock = clock or time.monotonic
        self._entries: Dict[str, CounterEntry] = {}
        self._lock = asyncio.Lock()
        self._max_entries = max_entries
        self._sweep_interval = sweep_interval
        self._writes_since_sweep = 0

    def _live_entry(self, key: str, now: float) -> Optional[CounterEntry]:
        entry = self._entries.get(key)
        if entry is not None and entry.is_expired(now):
            del self._entries[key]
            return None
        return entry

    def _sweep_expired(self, now: float) -> int:
        """Drop every expired entry. Caller holds the lock."""
        expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired_keys:
            del self._entries[key]
        self._writes_since_sweep = 0
        if expired_keys:
            logger.debug(f"Swept {len(expired_keys)} expired counters, {len(self._entries)} remain")
        return len(expired_keys)

    async def increment_with_expiry(self, key: str, ttl: timedelta) -> int:
        """Increment ``key``; a fresh window starts when the old one expired."""
        async with self._lock:
            now = self._clock()
            self._writes_since_sweep += 1
            if (
                self._writes_since_sweep >= self._sweep_interval
                or len(self._entries) >= self._max_entries
            ):
                self._sweep_expired(now)

            entry = self._live_entry(key, now)
            if entry is None:
                entry = CounterEntry(count=0, expires_at=now + ttl.total_seconds())
                self._entries[key] = entry
            entry.count += 1
            return entry.count

    async def get(self, key: str) -> str:
        """Return the counter as a string, like Redis does."""
        async with self._lock:
            entry = self._live_entry(key, self._clock())
            if entry is None:
                raise CounterNotFoundError(f"Counter not found: {key}", details={"key": key})
            return str(entry.count)

    async def ttl(self, key: str) -> Optional[float]:
        """Remaining lifetime of ``key`` in seconds, None if absent."""
        async with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None:
                return None
            return entry.expires_at - now

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def purge_expired(self) -> int:
        """Sweep expired entries now and return how many were removed."""
        async with self._lock:
            return self._sweep_expired(self._clock())

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
            self._writes_since_sweep = 0
            logger.debug("Memory counter store cleared")

    def __len__(self) -> int:
        return len(self._entries)
