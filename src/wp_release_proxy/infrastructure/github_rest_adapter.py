"""GitHub REST API adapter — implements the ReleaseSource port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wp_release_proxy.domain.entities import Release, ReleaseAsset
from wp_release_proxy.domain.exceptions import (
    PackageFileNotFoundError,
    ReleaseNotFoundError,
    UpstreamError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
RAW_BASE = "https://raw.githubusercontent.com"


def _to_release(data: dict[str, Any]) -> Release:
    assets = tuple(
        ReleaseAsset(
            name=item.get("name", ""),
            browser_download_url=item["browser_download_url"],
        )
        for item in data.get("assets") or []
        if item.get("browser_download_url")
    )
    return Release(
        tag_name=data.get("tag_name", ""),
        published_at=data.get("published_at"),
        assets=assets,
    )


def _response_body(resp: httpx.Response) -> Any:
    """Decode an error body for proxying; non-JSON text gets the error envelope."""
    try:
        return resp.json()
    except ValueError:
        return {
            "status": "error",
            "message": resp.text or resp.reason_phrase or f"HTTP {resp.status_code}",
        }


class GitHubRestAdapter:
    """Concrete ReleaseSource backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        user: str,
        token: str,
        *,
        user_agent: str = "wp-release-proxy/1.0",
        api_url: str = GITHUB_API,
        raw_url: str = RAW_BASE,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._raw_url = raw_url.rstrip("/")
        self._auth = httpx.BasicAuth(user, token)
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }

    async def list_releases(self, vendor: str, package: str) -> list[Release]:
        """GET /repos/{vendor}/{package}/releases → [Release] (newest first)."""
        resp = await self._api_get(f"/repos/{vendor}/{package}/releases")
        data = resp.json()
        if not isinstance(data, list):
            return []
        return [_to_release(item) for item in data if isinstance(item, dict)]

    async def get_release_by_tag(self, vendor: str, package: str, tag: str) -> Release:
        """GET /repos/{vendor}/{package}/releases/tags/{tag} → Release."""
        resp = await self._api_get(f"/repos/{vendor}/{package}/releases/tags/{tag}")
        data = resp.json()
        if not isinstance(data, dict):
            raise ReleaseNotFoundError(f"No release found for version {tag}!")
        return _to_release(data)

    async def fetch_file_content(
        self, vendor: str, package: str, ref: str, path: str
    ) -> str:
        """Fetch raw file content via raw.githubusercontent.com."""
        raw_url = self.raw_file_url(vendor, package, ref, path)
        resp = await self._get(raw_url)

        if resp.status_code == 200:
            return resp.text

        logger.debug("Raw file %s answered HTTP %d", raw_url, resp.status_code)
        raise PackageFileNotFoundError(raw_url)

    def raw_file_url(self, vendor: str, package: str, ref: str, path: str) -> str:
        return f"{self._raw_url}/{vendor}/{package}/{ref}/{path}"

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request; non-2xx becomes :class:`UpstreamError`."""
        resp = await self._get(f"{self._api_url}{endpoint}")

        if resp.is_success:
            return resp

        if resp.status_code in (403, 429) and resp.headers.get("x-ratelimit-remaining") == "0":
            logger.warning(
                "GitHub API rate limit exceeded (reset at %s)",
                resp.headers.get("x-ratelimit-reset", "unknown"),
            )

        raise UpstreamError(resp.status_code, _response_body(resp))

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            return await self._client.get(url, headers=self._headers, auth=self._auth)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(
                f"Network error fetching {url}: {exc}"
            ) from exc
