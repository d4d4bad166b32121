"""Counting store adapters - Redis and in-memory implementations."""

from .redis_adapter import RedisCounterStore
from .memory_adapter import MemoryCounterStore

__all__ = [
    "RedisCounterStore",
    "MemoryCounterStore",
]
