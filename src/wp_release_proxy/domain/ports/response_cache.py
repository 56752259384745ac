"""Port: response cache — an opaque store of full HTTP responses."""

from __future__ import annotations

from typing import Protocol

from wp_release_proxy.domain.entities import CachedResponse


class ResponseCache(Protocol):
    """Store / lookup of complete responses keyed by request URL."""

    async def match(self, key: str) -> CachedResponse | None:
        """Return the stored response for ``key``, or ``None`` on a miss."""
        ...

    async def put(self, key: str, response: CachedResponse, ttl: float) -> None:
        """Store ``response`` under ``key`` for ``ttl`` seconds."""
        ...
