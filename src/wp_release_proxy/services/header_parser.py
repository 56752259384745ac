"""WordPress file-header extraction.

Plugins and themes declare their metadata as ``Name: value`` lines inside a
comment block at the top of the main PHP file or ``style.css``.
"""

from __future__ import annotations

import re

KNOWN_HEADERS: tuple[str, ...] = (
    "Author",
    "Author URI",
    "Description",
    "Domain Path",
    "License",
    "License URI",
    "Plugin Name",
    "Plugin URI",
    "Requires at least",
    "Requires PHP",
    "Tested up to",
    "Text Domain",
    "Theme Name",
    "Theme URI",
    "Version",
)

_HEADER_PATTERNS: dict[str, re.Pattern[str]] = {
    header: re.compile(re.escape(header) + r":(.*)$", re.MULTILINE)
    for header in KNOWN_HEADERS
}


def parse_file_headers(contents: str) -> dict[str, str]:
    """Return ``{header: value}`` for every known header found in *contents*.

    The first matching line wins and the value is stripped.  Headers that do
    not appear are left out of the result.
    """
    headers: dict[str, str] = {}
    for header, pattern in _HEADER_PATTERNS.items():
        match = pattern.search(contents)
        if match:
            headers[header] = match.group(1).strip()
    return headers
