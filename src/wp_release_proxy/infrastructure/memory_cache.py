"""In-process response cache — implements the ResponseCache port."""

from __future__ import annotations

import logging
import time
from typing import Callable

from wp_release_proxy.domain.entities import CachedResponse

logger = logging.getLogger(__name__)


class InMemoryResponseCache:
    """TTL cache of full responses, keyed by request URL.

    Only touched from the event loop, so no locking is needed.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, tuple[float, CachedResponse]] = {}
        self._max_entries = max_entries
        self._clock = clock

    async def match(self, key: str) -> CachedResponse | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, response = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None

        logger.debug("Cache hit for %s", key)
        return response

    async def put(self, key: str, response: CachedResponse, ttl: float) -> None:
        if ttl <= 0:
            return

        now = self._clock()
        if len(self._entries) >= self._max_entries:
            self._evict(now)

        self._entries[key] = (now + ttl, response)
        logger.debug("Cached %s for %ss", key, ttl)

    def __len__(self) -> int:
        return len(self._entries)

    def _evict(self, now: float) -> None:
        """Drop expired entries, then the oldest ones until there is room."""
        for key in [k for k, (exp, _) in self._entries.items() if exp <= now]:
            del self._entries[key]
        while len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]
