"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from wp_release_proxy.domain.entities import EntityType
from wp_release_proxy.domain.exceptions import InvalidRequestError

_ENTITY_ALIASES: dict[str, EntityType] = {
    "plugin": EntityType.PLUGIN,
    "plugins": EntityType.PLUGIN,
    "theme": EntityType.THEME,
    "themes": EntityType.THEME,
}


def entity_type_from_segment(segment: str) -> EntityType:
    """Normalize a singular or plural path segment to an :class:`EntityType`."""
    try:
        return _ENTITY_ALIASES[segment.lower()]
    except KeyError:
        raise InvalidRequestError(
            f'Invalid entity type: "{segment}". '
            f"Expected one of: {', '.join(_ENTITY_ALIASES)}"
        ) from None


def entity_type_from_file(file: str) -> EntityType:
    """Stylesheets are themes; anything else is a plugin."""
    extension = file.rsplit(".", 1)[-1] if "." in file else ""
    return EntityType.THEME if extension.lower() == "css" else EntityType.PLUGIN


def default_file(entity_type: EntityType, package: str) -> str:
    if entity_type is EntityType.THEME:
        return "style.css"
    return f"{package}.php"


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Everything needed to resolve one plugin / theme request.

    ``basename`` is never stored; it is always rebuilt from ``slug`` and
    ``file`` so the two can not drift apart.
    """

    entity_type: EntityType
    vendor: str
    package: str
    slug: str
    file: str
    version: str | None = None
    is_download: bool = False

    @property
    def basename(self) -> str:
        return f"{self.slug}/{self.file}"

    @property
    def is_plugin(self) -> bool:
        return self.entity_type is EntityType.PLUGIN

    @property
    def is_theme(self) -> bool:
        return self.entity_type is EntityType.THEME
