"""Small in-process registries keyed by hashable values."""

import asyncio
import time
from collections import OrderedDict
from collections.abc import Callable, Hashable
from weakref import WeakValueDictionary


class RecentKeys:
    """Remembers keys for a limited time, with a bounded number of entries.

    Once capacity is reached the oldest key is forgotten first.
    """

    def __init__(
        self,
        ttl_seconds: float = 1800,
        max_entries: int = 10000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._seen: OrderedDict[Hashable, float] = OrderedDict()

    def add(self, key: Hashable) -> bool:
        """Remember a key.

        Args:
            key: Key to remember

        Returns:
            True if the key was new (or had expired), False if it was
            already remembered
        """
        now = self._clock()
        self._expire(now)

        if key in self._seen:
            return False

        while len(self._seen) >= self.max_entries:
            self._seen.popitem(last=False)

        self._seen[key] = now
        return True

    def discard(self, key: Hashable) -> None:
        """Forget a key so the next ``add`` treats it as new."""
        self._seen.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        self._expire(self._clock())
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def _expire(self, now: float) -> None:
        # Entries are in insertion order, so expired ones are at the front
        while self._seen:
            key, added_at = next(iter(self._seen.items()))
            if now - added_at <= self.ttl_seconds:
                break
            del self._seen[key]


class KeyedLocks:
    """One asyncio lock per key, released from memory once unused."""

    def __init__(self) -> None:
        self._locks: WeakValueDictionary[Hashable, asyncio.Lock] = WeakValueDictionary()

    def get(self, key: Hashable) -> asyncio.Lock:
        """Get the lock for a key, creating it if nobody holds a reference."""
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock
