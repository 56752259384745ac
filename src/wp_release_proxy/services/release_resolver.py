"""Release resolution — pick the release that governs a request."""

from __future__ import annotations

import logging

from wp_release_proxy.domain.entities import Release, ResolvedRelease
from wp_release_proxy.domain.exceptions import ReleaseNotFoundError
from wp_release_proxy.domain.ports.release_source import ReleaseSource

logger = logging.getLogger(__name__)


def first_usable_release(releases: list[Release]) -> Release:
    """Return the first release (in upstream order) that carries an asset."""
    if not releases:
        raise ReleaseNotFoundError("No releases available!")

    for release in releases:
        if release.has_assets:
            return release

    raise ReleaseNotFoundError("No release asset found!")


class ReleaseResolver:
    """Selects the governing release for a vendor / package / version."""

    def __init__(self, source: ReleaseSource) -> None:
        self._source = source

    async def latest(self, vendor: str, package: str) -> Release:
        """Newest release that has a downloadable asset."""
        releases = await self._source.list_releases(vendor, package)
        release = first_usable_release(releases)
        logger.debug(
            "Latest usable release of %s/%s is %s (%d listed)",
            vendor, package, release.tag_name, len(releases),
        )
        return release

    async def by_tag(self, vendor: str, package: str, version: str) -> Release:
        """The release tagged exactly ``version``; it must carry an asset."""
        release = await self._source.get_release_by_tag(vendor, package, version)
        if not release.has_assets:
            raise ReleaseNotFoundError(f"No release asset found for version {version}!")
        return release

    async def resolve(
        self,
        vendor: str,
        package: str,
        version: str | None = None,
        *,
        include_latest: bool = False,
    ) -> ResolvedRelease:
        """Resolve the requested (or latest) release.

        Without a version the latest usable release is both the governing and
        the latest release.  With a version, the latest one is only looked up
        when ``include_latest`` is set, after the tagged release succeeded.
        """
        if version is None:
            release = await self.latest(vendor, package)
            return ResolvedRelease(release=release, latest=release)

        release = await self.by_tag(vendor, package, version)
        latest = await self.latest(vendor, package) if include_latest else None
        return ResolvedRelease(release=release, latest=latest)
