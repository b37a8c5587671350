"""In-memory TTL cache of processed event identifiers."""

import threading
from typing import Optional

from strillone.core.clock import Clock, MonotonicClock
from strillone.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TTL = 300.0


class DedupCache:
    """Membership store whose entries expire a fixed time after insertion.

    An entry set at ``t`` is visible during ``[t, t + ttl)``. Expired entries
    read as absent even before ``purge_expired`` reclaims them.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Optional[Clock] = None) -> None:
        """Initialize cache.

        Args:
            ttl: Seconds an entry stays visible after being set
            clock: Time source (default monotonic)
        """
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self.clock = clock or MonotonicClock()
        # key -> expires_at
        self._entries: dict[str, float] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bool:
        """Return whether key was set within the last ``ttl`` seconds."""
        with self._lock:
            expires_at = self._entries.get(key)
            if expires_at is None:
                return False
            if self.clock.now() >= expires_at:
                del self._entries[key]
                return False
            return True

    def set(self, key: str) -> None:
        """Record key as present, restarting its window."""
        with self._lock:
            self._entries[key] = self.clock.now() + self.ttl

    def purge_expired(self) -> int:
        """Drop expired entries.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self.clock.now()
            expired = [key for key, expires_at in self._entries.items() if expires_at <= now]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.debug("dedup_cache_purged", removed=len(expired), remaining=len(self))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
