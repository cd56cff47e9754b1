"""In-memory cache with TTL and stale-serve on refresh failure.

Unlike a plain TTL cache, an expired entry is never dropped on its own.
It is only replaced by a successful refresh; when the refresh fails the
previous payload keeps being served.

Entry states:
    EMPTY  -> fetch ok -> FRESH         fetch failed -> EMPTY (serves [])
    FRESH  -> served as-is, no fetch
    STALE  -> fetch ok -> FRESH         fetch failed -> STALE (serves old payload)

TTLs:
- Results page: 3 minutes (scores move during live play)
- Schedule feed (per date): 2 minutes
"""

import logging
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

CACHE_TTL_RESULTS = 3 * 60
CACHE_TTL_SCHEDULE = 2 * 60


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload and when it was captured (epoch seconds)."""

    captured_at: float
    payload: Any


class StaleCache:
    """Thread-safe keyed cache that serves stale data when a refresh fails.

    The fetch callable returns the new payload, or None when the source
    had nothing usable. An exception from fetch is treated the same way.

    The lock only guards reads and swaps - the fetch runs outside it, so
    concurrent misses may each fetch. A refresh only replaces an entry that
    is not newer than the moment the refresh started.

    Usage:
        cache = StaleCache(ttl_seconds=120)
        rows = cache.get("20250101", lambda: provider.fetch_schedule("20250101"))
    """

    def __init__(
        self,
        ttl_seconds: float,
        name: str = "cache",
        clock: Callable[[], float] = time.time,
    ):
        self._ttl = ttl_seconds
        self._name = name
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._refreshes = 0
        self._failures = 0

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.captured_at < self._ttl

    def peek(self, key: Hashable) -> CacheEntry | None:
        """Return the raw entry for a key without fetching."""
        with self._lock:
            return self._entries.get(key)

    def get(self, key: Hashable, fetch: Callable[[], Any | None]) -> Any:
        """Get the payload for key, refreshing it if missing or expired.

        Args:
            key: Cache key (e.g., date key)
            fetch: Called on a miss; returns the payload or None on failure

        Returns:
            Fresh payload, stale payload if the refresh failed, or [] if
            there has never been a successful fetch
        """
        started = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry, started):
                self._hits += 1
                return entry.payload
            self._misses += 1

        try:
            payload = fetch()
        except Exception as e:
            logger.warning("[CACHE] %s refresh for %s raised: %s", self._name, key, e)
            payload = None

        with self._lock:
            current = self._entries.get(key)
            if payload is None:
                self._failures += 1
                if current is not None:
                    logger.info(
                        "[CACHE] %s refresh failed for %s - serving stale data (age %.0fs)",
                        self._name,
                        key,
                        started - current.captured_at,
                    )
                    return current.payload
                return []

            self._refreshes += 1
            # Another refresh finished after ours started: keep the newer one
            if current is not None and current.captured_at > started:
                return current.payload
            self._entries[key] = CacheEntry(captured_at=self._clock(), payload=payload)
            return payload

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._refreshes = 0
            self._failures = 0

    @property
    def size(self) -> int:
        return len(self._entries)

    def stats(self) -> dict:
        """Get cache statistics."""
        now = self._clock()
        with self._lock:
            total = len(self._entries)
            stale = sum(1 for e in self._entries.values() if not self._is_fresh(e, now))
            return {
                "name": self._name,
                "ttl_seconds": self._ttl,
                "total_entries": total,
                "fresh_entries": total - stale,
                "stale_entries": stale,
                "hits": self._hits,
                "misses": self._misses,
                "refreshes": self._refreshes,
                "failures": self._failures,
            }
