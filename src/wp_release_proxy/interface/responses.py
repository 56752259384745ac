"""Response classes shared by the routes and the error handlers."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse

from wp_release_proxy.interface.schemas import ErrorResponse


class PrettyJSONResponse(JSONResponse):
    """``application/json`` rendered with a 2-space indent, non-ASCII kept as-is."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def error_json(status_code: int, message: str) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )
