"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations

from typing import Any


class WpReleaseProxyError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRequestError(WpReleaseProxyError):
    """The inbound request is missing or has an invalid parameter (400)."""


# ── Resolution errors ───────────────────────────────────────────────────────


class ReleaseNotFoundError(WpReleaseProxyError):
    """No release, or no release carrying a downloadable asset (404)."""


class PackageFileNotFoundError(WpReleaseProxyError):
    """The plugin / theme main file could not be fetched (404)."""


# ── GitHub errors ───────────────────────────────────────────────────────────


class UpstreamError(WpReleaseProxyError):
    """GitHub answered with a non-success status; proxied to the caller as-is."""

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(f"GitHub API returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamUnavailableError(WpReleaseProxyError):
    """GitHub could not be reached at all (network / timeout)."""
