from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from wp_release_proxy.infrastructure.config import Settings
from wp_release_proxy.infrastructure.github_rest_adapter import GitHubRestAdapter
from wp_release_proxy.infrastructure.memory_cache import InMemoryResponseCache
from wp_release_proxy.interface.app import create_app
from wp_release_proxy.interface.dependencies import (
    build_http_client,
    get_app_settings,
    get_response_cache,
    get_use_case,
)
from wp_release_proxy.services.describe_package import DescribePackageUseCase

API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


class FakeGitHub:
    """Routes outbound requests to canned responses and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def json(self, url: str, body: Any, status: int = 200) -> None:
        self.routes[url] = lambda: httpx.Response(status, json=body)

    def text(self, url: str, body: str, status: int = 200) -> None:
        self.routes[url] = lambda: httpx.Response(status, text=body)

    def redirect(self, url: str, location: str, status: int = 301) -> None:
        self.routes[url] = lambda: httpx.Response(
            status, headers={"location": location}, json={"message": "Moved Permanently"}
        )

    def fail(self, url: str, exc: Exception) -> None:
        def _raise() -> httpx.Response:
            raise exc

        self.routes[url] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return route()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def adapter(github: FakeGitHub) -> GitHubRestAdapter:
    client = build_http_client(5.0, transport=httpx.MockTransport(github.handler))
    return GitHubRestAdapter(client, "octo", "secret", user_agent="test-agent")


@pytest.fixture
def release_json() -> Callable[..., dict[str, Any]]:
    def _make(
        tag: str,
        assets: int = 1,
        published_at: str | None = "2024-05-01T12:00:00Z",
    ) -> dict[str, Any]:
        return {
            "tag_name": tag,
            "published_at": published_at,
            "assets": [
                {
                    "name": f"widget-{i}.zip",
                    "browser_download_url": (
                        f"https://github.com/acme/widget/releases/download/{tag}/widget-{i}.zip"
                    ),
                }
                for i in range(assets)
            ],
        }

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        github_user="octo",
        github_token=SecretStr("secret"),
        cache_ttl_seconds=10,
    )


@pytest.fixture
def make_client(
    adapter: GitHubRestAdapter, settings: Settings
) -> Callable[..., TestClient]:
    def _make(
        version_format: str = "string",
        use_case: DescribePackageUseCase | None = None,
    ) -> TestClient:
        app = create_app()
        cache = InMemoryResponseCache()
        app.dependency_overrides[get_use_case] = lambda: use_case or DescribePackageUseCase(
            adapter, version_format  # type: ignore[arg-type]
        )
        app.dependency_overrides[get_response_cache] = lambda: cache
        app.dependency_overrides[get_app_settings] = lambda: settings
        return TestClient(app, raise_server_exceptions=False)

    return _make
