"""API routes — thin controllers that delegate to the use case.

A single catch-all route serves both the path form
(``/plugins/{vendor}/{package}[/{version}][/download]``) and the query form
(``/?vendor=...&package=...``); the parser sorts them out.
"""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from fastapi.responses import RedirectResponse

from wp_release_proxy.domain.entities import CachedResponse
from wp_release_proxy.domain.ports.response_cache import ResponseCache
from wp_release_proxy.infrastructure.config import Settings
from wp_release_proxy.interface.dependencies import (
    get_app_settings,
    get_response_cache,
    get_use_case,
)
from wp_release_proxy.interface.responses import PrettyJSONResponse
from wp_release_proxy.interface.schemas import ErrorResponse, PackagePayload
from wp_release_proxy.services.describe_package import DescribePackageUseCase
from wp_release_proxy.services.request_parser import parse_request

router = APIRouter()

_NOT_CACHED_HEADERS = frozenset({"content-length"})


def _to_cached(response: Response) -> CachedResponse:
    return CachedResponse(
        status_code=response.status_code,
        headers={
            k: v for k, v in response.headers.items() if k not in _NOT_CACHED_HEADERS
        },
        body=bytes(response.body),
    )


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    """Liveness probe; must stay ahead of the catch-all below."""
    return {"status": "ok"}


@router.get(
    "/{path:path}",
    response_model=None,
    responses={
        200: {"model": PackagePayload, "description": "Plugin or theme metadata"},
        301: {"description": "Redirect to the release asset (download requests)"},
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        404: {"model": ErrorResponse, "description": "No usable release or main file"},
        502: {"model": ErrorResponse, "description": "GitHub unreachable"},
    },
)
async def package_info(
    request: Request,
    background_tasks: BackgroundTasks,
    use_case: DescribePackageUseCase = Depends(get_use_case),
    cache: ResponseCache = Depends(get_response_cache),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Describe a plugin / theme release, or redirect to its download."""
    cache_key = str(request.url)
    cached = await cache.match(cache_key)
    if cached is not None:
        return Response(
            content=cached.body,
            status_code=cached.status_code,
            headers=cached.headers,
        )

    descriptor = parse_request(request.url.path, request.query_params)

    if descriptor.is_download:
        return RedirectResponse(await use_case.download_url(descriptor), status_code=301)

    payload = await use_case.describe(descriptor)
    response = PrettyJSONResponse(
        content=payload,
        headers={"Cache-Control": f"s-maxage={settings.cache_ttl_seconds}"},
    )

    # Written after the response has been sent
    background_tasks.add_task(
        cache.put, cache_key, _to_cached(response), settings.cache_ttl_seconds
    )
    return response
