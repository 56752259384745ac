"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntityType(str, Enum):
    """Kind of WordPress package being described."""

    PLUGIN = "plugin"
    THEME = "theme"


@dataclass(frozen=True, slots=True)
class ReleaseAsset:
    """A downloadable file attached to a release."""

    name: str
    browser_download_url: str


@dataclass(frozen=True, slots=True)
class Release:
    """A published GitHub release, as returned by the releases API."""

    tag_name: str
    published_at: str | None = None
    assets: tuple[ReleaseAsset, ...] = field(default_factory=tuple)

    @property
    def has_assets(self) -> bool:
        return bool(self.assets)

    @property
    def download_url(self) -> str:
        return self.assets[0].browser_download_url


@dataclass(frozen=True, slots=True)
class ResolvedRelease:
    """The release governing a request, plus the latest viable one if known."""

    release: Release
    latest: Release | None = None


@dataclass(frozen=True, slots=True)
class CachedResponse:
    """A complete HTTP response stored in the response cache."""

    status_code: int
    headers: dict[str, str]
    body: bytes
