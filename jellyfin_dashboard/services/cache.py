"""In-memory freshness cache for the latest-items shelf. No Redis needed.

One entry per filter key ("" = all types), holding the last successfully
transformed card list and when it was fetched. Entries are only ever
overwritten by a newer success; a failed refresh leaves them in place.

The lock guards the dict only. The upstream call runs outside it, so a slow
refresh of one filter never holds up lookups of another. Two requests for
the same stale filter may both refetch; the last writer wins.

Note: Each uvicorn worker has its own cache instance.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from jellyfin_dashboard.models import Card

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 60.0

Loader = Callable[[str], Awaitable[list[Card]]]


@dataclass(frozen=True)
class CacheEntry:
    cards: list[Card]
    fetched_at: float


class LatestCache:
    def __init__(
        self,
        loader: Loader,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._loader = loader
        self._ttl = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    async def get_or_refresh(self, key: str = "") -> list[Card]:
        """Return cards for ``key``, refetching when missing or older than the TTL."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is not None and self._clock() - entry.fetched_at < self._ttl:
                logger.debug("Cache hit for %r", key)
                return entry.cards

        cards = await self._loader(key)

        async with self._lock:
            self._store[key] = CacheEntry(cards=cards, fetched_at=self._clock())
        return cards

    # entry() and snapshot() are synchronous inspection reads: they never await,
    # so on the single event loop they cannot interleave with a locked write.
    def entry(self, key: str = "") -> CacheEntry | None:
        return self._store.get(key)

    def snapshot(self) -> dict[str, dict]:
        """Per-filter card count and age in seconds, for the health route."""
        now = self._clock()
        return {
            key or "all": {
                "items": len(entry.cards),
                "age_seconds": round(now - entry.fetched_at, 1),
                "fresh": now - entry.fetched_at < self._ttl,
            }
            for key, entry in list(self._store.items())
        }
