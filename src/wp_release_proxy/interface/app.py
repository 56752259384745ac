"""FastAPI application factory for the release proxy."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from wp_release_proxy.infrastructure.config import get_settings
from wp_release_proxy.interface.dependencies import shutdown, startup
from wp_release_proxy.interface.error_handlers import register_error_handlers
from wp_release_proxy.interface.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the outbound GitHub client and the response cache."""
    await startup()
    settings = get_settings()
    logger.info(
        "Proxying %s releases (raw files from %s), cache TTL %ss, version format %r",
        settings.github_api_url,
        settings.github_raw_url,
        settings.cache_ttl_seconds,
        settings.version_format,
    )
    try:
        yield
    finally:
        await shutdown()


def create_app() -> FastAPI:
    """Wire the package route, its error envelope and the health probe."""
    app = FastAPI(
        title="WordPress Release Proxy",
        version="1.0.0",
        description=(
            "Describes a WordPress plugin or theme hosted on GitHub from its "
            "latest (or a given) release, or redirects to the release asset."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    return app
