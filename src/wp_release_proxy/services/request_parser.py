"""Request parsing — turn an inbound path + query string into a descriptor.

Two conventions are accepted and may be mixed:

* path form ``/{plugin|plugins|theme|themes}/{vendor}/{package}[/{version}][/download]``
* query form ``?vendor=...&package=...[&basename=slug/file]``

Query parameters win over path segments.  ``slug``, ``file`` and ``download``
may be given as query parameters with either form.
"""

from __future__ import annotations

from typing import Mapping

from wp_release_proxy.domain.entities import EntityType
from wp_release_proxy.domain.exceptions import InvalidRequestError
from wp_release_proxy.domain.value_objects import (
    RequestDescriptor,
    default_file,
    entity_type_from_file,
    entity_type_from_segment,
)

DOWNLOAD_SEGMENT = "download"

_FALSE_FLAGS = frozenset({"0", "false", "no", "off"})


def _flag(value: str | None) -> bool:
    """``?download`` and ``?download=1`` are both true; absent is false."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_FLAGS


def _param(query: Mapping[str, str], name: str) -> str | None:
    value = query.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _split_basename(basename: str) -> tuple[str, str]:
    slug, _, file = basename.strip("/").partition("/")
    if not slug or not file:
        raise InvalidRequestError(
            f'Invalid URL param: basename. Expected "slug/file", got "{basename}"'
        )
    return slug, file


def parse_request(path: str, query: Mapping[str, str]) -> RequestDescriptor:
    """Build a :class:`RequestDescriptor` or raise :class:`InvalidRequestError`."""
    segments = [s for s in path.split("/") if s]

    entity_type: EntityType | None = None
    vendor = package = version = None
    is_download = False

    if segments:
        entity_type = entity_type_from_segment(segments[0])
        vendor = segments[1] if len(segments) > 1 else None
        package = segments[2] if len(segments) > 2 else None
        rest = segments[3:]
        if rest and rest[-1] == DOWNLOAD_SEGMENT:
            is_download = True
            rest = rest[:-1]
        if len(rest) > 1:
            raise InvalidRequestError(f'Unexpected URL path segment: "{rest[1]}"')
        version = rest[0] if rest else None

    vendor = _param(query, "vendor") or vendor
    package = _param(query, "package") or package
    version = _param(query, "version") or version
    is_download = is_download or _flag(query.get("download"))

    if not vendor:
        raise InvalidRequestError("Missing URL param: vendor")
    if not package:
        raise InvalidRequestError("Missing URL param: package")

    basename = _param(query, "basename")
    if basename is not None:
        slug, file = _split_basename(basename)
    else:
        slug = package
        file = None

    file = _param(query, "file") or file
    if entity_type is None:
        entity_type = entity_type_from_file(file or default_file(EntityType.PLUGIN, package))

    return RequestDescriptor(
        entity_type=entity_type,
        vendor=vendor,
        package=package,
        slug=_param(query, "slug") or slug,
        file=file or default_file(entity_type, package),
        version=version,
        is_download=is_download,
    )
