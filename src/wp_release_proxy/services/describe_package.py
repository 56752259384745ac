"""Describe-package use case — the request → release → payload pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`ReleaseSource` port and the pure service modules; the interface
layer injects the concrete GitHub adapter at runtime.
"""

from __future__ import annotations

import logging
from typing import Any

from wp_release_proxy.domain.ports.release_source import ReleaseSource
from wp_release_proxy.domain.value_objects import RequestDescriptor
from wp_release_proxy.services.metadata_fetcher import MetadataFetcher
from wp_release_proxy.services.payload_assembler import VersionFormat, assemble_payload
from wp_release_proxy.services.release_resolver import ReleaseResolver

logger = logging.getLogger(__name__)


class DescribePackageUseCase:
    """Orchestrates release resolution, header fetching and payload assembly.

    Parameters
    ----------
    release_source:
        Adapter that can list releases and read raw files from GitHub.
    version_format:
        ``"string"`` reports the declared ``Version`` header; ``"object"``
        reports ``{"current": ..., "latest": ...}``.
    """

    def __init__(
        self,
        release_source: ReleaseSource,
        version_format: VersionFormat = "string",
    ) -> None:
        self._resolver = ReleaseResolver(release_source)
        self._fetcher = MetadataFetcher(release_source)
        self._version_format = version_format

    # ── Public entry points ─────────────────────────────────────────────

    async def describe(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        """Run the full pipeline and return the response document."""
        logger.info(
            "Describing %s %s/%s@%s",
            descriptor.entity_type.value,
            descriptor.vendor,
            descriptor.package,
            descriptor.version or "latest",
        )

        # 1. Release first; the file path depends on its tag
        resolved = await self._resolver.resolve(
            descriptor.vendor,
            descriptor.package,
            descriptor.version,
            include_latest=self._version_format == "object",
        )

        # 2. Main file headers at that tag
        headers = await self._fetcher.fetch_headers(descriptor, resolved.release.tag_name)

        # 3. Map onto the output document
        return assemble_payload(descriptor, headers, resolved, self._version_format)

    async def download_url(self, descriptor: RequestDescriptor) -> str:
        """Return the first asset URL of the governing release."""
        resolved = await self._resolver.resolve(
            descriptor.vendor, descriptor.package, descriptor.version
        )
        logger.info(
            "Redirecting %s/%s to %s asset",
            descriptor.vendor,
            descriptor.package,
            resolved.release.tag_name,
        )
        return resolved.release.download_url
