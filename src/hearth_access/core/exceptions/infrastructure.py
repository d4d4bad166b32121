"""Infrastructure-specific exceptions for hearth-access.

This module defines exceptions related to the external counting store
that backs rate limiting.
"""

from .base import HearthAccessError


# Counter Store Errors
class CounterStoreError(HearthAccessError):
    """Base class for counting-store errors."""
    pass


class CounterStoreConnectionError(CounterStoreError):
    """Raised when the counting store cannot be reached."""
    pass


class CounterStoreTimeoutError(CounterStoreError):
    """Raised when a counting store round-trip times out."""
    pass


class CounterNotFoundError(CounterStoreError):
    """Raised when a key is absent or has expired."""
    pass
