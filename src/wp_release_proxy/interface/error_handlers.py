"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.  GitHub
errors are the exception: their status and body are proxied unchanged.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wp_release_proxy.domain.exceptions import (
    InvalidRequestError,
    PackageFileNotFoundError,
    ReleaseNotFoundError,
    UpstreamError,
    UpstreamUnavailableError,
    WpReleaseProxyError,
)
from wp_release_proxy.interface.responses import PrettyJSONResponse, error_json

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[WpReleaseProxyError], int]] = [
    (InvalidRequestError, 400),
    (ReleaseNotFoundError, 404),
    (PackageFileNotFoundError, 404),
    (UpstreamUnavailableError, 502),
]


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                logger.warning("%s: %s", type(exc).__name__, exc)
                return error_json(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Proxied GitHub errors ───────────────────────────────────────────

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.warning("Proxying GitHub HTTP %d for %s", exc.status_code, request.url.path)
        return PrettyJSONResponse(status_code=exc.status_code, content=exc.body)

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return error_json(500, f"{type(exc).__name__}: {exc}")
