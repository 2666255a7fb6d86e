"""Short-lived in-memory cache of aggregated player stats."""

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional

import cachetools

from .stats import PlayerStats, aggregate

logger = logging.getLogger("voidstats")

CACHE_TTL = 180.0
CACHE_SIZE = 1_000

Fetch = Callable[[str], Awaitable[Mapping[str, Any]]]


@dataclass(frozen=True)
class CacheEntry:
    stats: PlayerStats
    fetched_at: float


class StatsCache:
    """
    Memoizes aggregated stats per username for ``ttl`` seconds.

    Keys are the username exactly as typed, so ``Foo`` and ``foo`` are cached
    separately. An expired entry is replaced by the next successful fetch.
    """

    def __init__(
        self,
        fetch: Fetch,
        ttl: float = CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
        maxsize: int = CACHE_SIZE,
    ) -> None:
        self._fetch = fetch
        self.ttl = ttl
        self._clock = clock
        self._entries: cachetools.TTLCache = cachetools.TTLCache(
            maxsize=maxsize, ttl=ttl, timer=clock
        )

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, username: str) -> Optional[CacheEntry]:
        """Return the entry for ``username`` if it is still fresh."""
        return self._entries.get(username)

    def set(self, username: str, stats: PlayerStats) -> CacheEntry:
        entry = CacheEntry(stats=stats, fetched_at=self._clock())
        self._entries[username] = entry
        return entry

    async def get_or_fetch(self, username: str) -> PlayerStats:
        """
        Return cached stats, fetching and aggregating them on a miss.

        Raises:
            PlayerNotFound: Propagated from the fetch; nothing is cached.
            UpstreamError: Propagated from the fetch; nothing is cached.
        """
        entry = self.get(username)
        if entry is not None:
            logger.debug(f"Cache hit for {username}")
            return entry.stats
        logger.debug(f"Cache miss for {username}")
        blob = await self._fetch(username)
        return self.set(username, aggregate(blob)).stats
