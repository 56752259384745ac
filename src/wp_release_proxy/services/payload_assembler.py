"""Payload assembler — maps headers + release data onto the response document.

Key order is part of the contract: cached bodies are compared byte for byte.
"""

from __future__ import annotations

from typing import Any, Literal

from wp_release_proxy.domain.entities import ResolvedRelease
from wp_release_proxy.domain.value_objects import RequestDescriptor

VersionFormat = Literal["string", "object"]


def _version(
    headers: dict[str, str],
    resolved: ResolvedRelease,
    version_format: VersionFormat,
) -> str | dict[str, str]:
    declared = headers.get("Version", "")
    if version_format == "string":
        return declared

    latest = resolved.latest or resolved.release
    return {
        "current": declared or resolved.release.tag_name,
        "latest": latest.tag_name,
    }


def assemble_payload(
    descriptor: RequestDescriptor,
    headers: dict[str, str],
    resolved: ResolvedRelease,
    version_format: VersionFormat = "string",
) -> dict[str, Any]:
    """Build the JSON document describing one plugin or theme release."""
    prefix = "Theme" if descriptor.is_theme else "Plugin"
    release = resolved.release

    payload: dict[str, Any] = {
        "name": headers.get(f"{prefix} Name", ""),
        "type": descriptor.entity_type.value,
        "version": _version(headers, resolved, version_format),
        "description": headers.get("Description", ""),
        "author": {
            "name": headers.get("Author", ""),
            "url": headers.get("Author URI", ""),
        },
        "updated": release.published_at or "",
        "slug": descriptor.slug,
    }

    if descriptor.is_plugin:
        payload["basename"] = descriptor.basename

    payload["url"] = headers.get(f"{prefix} URI", "")
    payload["download"] = release.download_url
    payload["requires"] = {
        "wp": headers.get("Requires at least", ""),
        "php": headers.get("Requires PHP", ""),
    }
    payload["tested"] = {"wp": headers.get("Tested up to", "")}

    return payload
