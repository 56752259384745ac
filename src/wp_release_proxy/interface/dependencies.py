"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx

from wp_release_proxy.domain.ports.response_cache import ResponseCache
from wp_release_proxy.infrastructure.config import Settings, get_settings
from wp_release_proxy.infrastructure.github_rest_adapter import GitHubRestAdapter
from wp_release_proxy.infrastructure.memory_cache import InMemoryResponseCache
from wp_release_proxy.services.describe_package import DescribePackageUseCase

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_response_cache: InMemoryResponseCache | None = None


def build_http_client(
    timeout: float, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Outbound client; GitHub answers renamed or transferred repositories with 301."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        transport=transport,
    )


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _response_cache  # noqa: PLW0603

    settings = get_settings()
    if not settings.has_credentials:
        logger.warning(
            "GITHUB_USER / GITHUB_TOKEN not set; GitHub will reject every request."
        )
    _http_client = build_http_client(settings.http_timeout)
    _response_cache = InMemoryResponseCache()


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _response_cache  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _response_cache = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_app_settings() -> Settings:
    return _settings()


def get_response_cache() -> ResponseCache:
    assert _response_cache is not None, "startup() was not called"
    return _response_cache


def get_use_case() -> DescribePackageUseCase:
    """Build the use case with the GitHub adapter injected."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"

    github_adapter = GitHubRestAdapter(
        client=_http_client,
        user=settings.github_user,
        token=settings.github_token.get_secret_value(),
        user_agent=settings.user_agent,
        api_url=settings.github_api_url,
        raw_url=settings.github_raw_url,
    )

    return DescribePackageUseCase(
        release_source=github_adapter,
        version_format=settings.version_format,
    )
