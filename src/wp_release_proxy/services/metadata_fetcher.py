"""Metadata fetching — read the main file of a release and parse its headers."""

from __future__ import annotations

import logging

from wp_release_proxy.domain.exceptions import PackageFileNotFoundError
from wp_release_proxy.domain.ports.release_source import ReleaseSource
from wp_release_proxy.domain.value_objects import RequestDescriptor
from wp_release_proxy.services.header_parser import parse_file_headers

logger = logging.getLogger(__name__)


class MetadataFetcher:
    """Fetches ``{vendor}/{package}/{tag}/{file}`` and extracts its headers."""

    def __init__(self, source: ReleaseSource) -> None:
        self._source = source

    async def fetch_headers(self, descriptor: RequestDescriptor, tag: str) -> dict[str, str]:
        try:
            contents = await self._source.fetch_file_content(
                descriptor.vendor, descriptor.package, tag, descriptor.file
            )
        except PackageFileNotFoundError as exc:
            raise PackageFileNotFoundError(
                f"Unable to fetch {descriptor.entity_type.value} file: {exc}"
            ) from exc

        headers = parse_file_headers(contents)
        logger.debug(
            "Parsed %d header(s) from %s@%s", len(headers), descriptor.basename, tag
        )
        return headers
