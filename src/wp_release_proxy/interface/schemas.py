"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel


class Author(BaseModel):
    name: str = ""
    url: str = ""


class Requires(BaseModel):
    wp: str = ""
    php: str = ""


class Tested(BaseModel):
    wp: str = ""


class VersionInfo(BaseModel):
    """Version pair reported when ``VERSION_FORMAT=object``."""

    current: str
    latest: str


class PackagePayload(BaseModel):
    """Successful response describing a plugin or theme.

    ``basename`` is only present for plugins.
    """

    name: str
    type: str
    version: str | VersionInfo
    description: str
    author: Author
    updated: str
    slug: str
    basename: str | None = None
    url: str
    download: str
    requires: Requires
    tested: Tested


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
