from __future__ import annotations

from wp_release_proxy.domain.entities import EntityType, Release, ReleaseAsset, ResolvedRelease
from wp_release_proxy.domain.value_objects import RequestDescriptor
from wp_release_proxy.interface.schemas import PackagePayload
from wp_release_proxy.services.payload_assembler import assemble_payload

ASSET_URL = "https://github.com/acme/widget/releases/download/v2.0/widget.zip"


def _resolved(tag: str = "v2.0", published_at: str | None = "2024-05-01T12:00:00Z") -> ResolvedRelease:
    release = Release(
        tag_name=tag,
        published_at=published_at,
        assets=(
            ReleaseAsset("widget.zip", ASSET_URL),
            ReleaseAsset("widget-src.zip", "https://example.com/other.zip"),
        ),
    )
    return ResolvedRelease(release=release, latest=release)


def _plugin() -> RequestDescriptor:
    return RequestDescriptor(
        entity_type=EntityType.PLUGIN,
        vendor="acme",
        package="widget",
        slug="widget",
        file="widget.php",
    )


def _theme() -> RequestDescriptor:
    return RequestDescriptor(
        entity_type=EntityType.THEME,
        vendor="acme",
        package="twentyx",
        slug="twentyx",
        file="style.css",
    )


def test_plugin_payload() -> None:
    headers = {
        "Plugin Name": "Widget",
        "Plugin URI": "https://example.com/widget",
        "Theme Name": "ignored",
        "Version": "2.0",
        "Author": "Acme",
        "Requires at least": "6.0",
        "Requires PHP": "8.1",
        "Tested up to": "6.5",
    }
    payload = assemble_payload(_plugin(), headers, _resolved())

    assert list(payload) == [
        "name", "type", "version", "description", "author", "updated",
        "slug", "basename", "url", "download", "requires", "tested",
    ]
    assert payload["name"] == "Widget"
    assert payload["type"] == "plugin"
    assert payload["version"] == "2.0"
    assert payload["author"] == {"name": "Acme", "url": ""}
    assert payload["updated"] == "2024-05-01T12:00:00Z"
    assert payload["basename"] == "widget/widget.php"
    assert payload["url"] == "https://example.com/widget"
    assert payload["download"] == ASSET_URL
    assert payload["requires"] == {"wp": "6.0", "php": "8.1"}
    assert payload["tested"] == {"wp": "6.5"}
    PackagePayload.model_validate(payload)


def test_theme_payload_has_no_basename() -> None:
    headers = {"Theme Name": "Twenty X", "Theme URI": "https://example.com/tx"}
    payload = assemble_payload(_theme(), headers, _resolved())

    assert "basename" not in payload
    assert payload["type"] == "theme"
    assert payload["name"] == "Twenty X"
    assert payload["url"] == "https://example.com/tx"


def test_missing_headers_default_to_empty_strings() -> None:
    payload = assemble_payload(_plugin(), {}, _resolved(published_at=None))

    assert payload["name"] == ""
    assert payload["version"] == ""
    assert payload["description"] == ""
    assert payload["updated"] == ""
    assert payload["url"] == ""
    assert payload["requires"] == {"wp": "", "php": ""}


def test_object_version_format() -> None:
    latest = _resolved("v3.0").release
    resolved = ResolvedRelease(release=_resolved("v2.0").release, latest=latest)

    payload = assemble_payload(_plugin(), {"Version": "2.0"}, resolved, "object")
    assert payload["version"] == {"current": "2.0", "latest": "v3.0"}

    payload = assemble_payload(_plugin(), {}, resolved, "object")
    assert payload["version"] == {"current": "v2.0", "latest": "v3.0"}
    PackagePayload.model_validate(payload)
