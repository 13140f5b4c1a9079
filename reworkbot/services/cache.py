"""
Single-slot TTL cache used by the API services.

Holds one value together with the monotonic deadline after which it is
considered stale. Reading never triggers a fetch; the owning service decides
when to refresh.
"""

import logging
import time
from typing import Callable, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ExpiringCache(Generic[T]):
    """One cached value with a freshness deadline."""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            ttl: Seconds a stored value stays fresh
            clock: Monotonic time source, replaceable in tests
        """
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        # (value, expires_at) replaced as one tuple so readers never mix writes
        self._entry: Optional[Tuple[T, float]] = None

    @property
    def value(self) -> Optional[T]:
        """The stored value, stale or not. None if nothing was ever stored."""
        entry = self._entry
        return entry[0] if entry is not None else None

    @property
    def expires_at(self) -> Optional[float]:
        entry = self._entry
        return entry[1] if entry is not None else None

    @property
    def is_expired(self) -> bool:
        entry = self._entry
        return entry is None or self._clock() >= entry[1]

    def get(self) -> Optional[T]:
        return self.value

    def set(self, value: T) -> None:
        """Store a value and restart the TTL window from now."""
        self._entry = (value, self._clock() + self.ttl)
        logger.debug(f"Cache refreshed, fresh for {self.ttl}s")

    def invalidate(self) -> None:
        self._entry = None
