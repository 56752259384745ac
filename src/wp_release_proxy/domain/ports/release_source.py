"""Port: release source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from wp_release_proxy.domain.entities import Release


class ReleaseSource(Protocol):
    """Abstract contract for reading releases and raw files of a repository."""

    async def list_releases(self, vendor: str, package: str) -> list[Release]:
        """Return all releases, newest first. Empty when there are none."""
        ...

    async def get_release_by_tag(self, vendor: str, package: str, tag: str) -> Release:
        """Return the release published under exactly ``tag``."""
        ...

    async def fetch_file_content(
        self, vendor: str, package: str, ref: str, path: str
    ) -> str:
        """Return the raw text of ``path`` at ``ref``."""
        ...
