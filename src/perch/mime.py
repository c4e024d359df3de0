"""Extension to MIME type table and extension extraction.

The table is fixed at startup and never mutated.  Keys are lowercase
extensions without the leading dot.
"""

import posixpath
from collections.abc import Mapping
from types import MappingProxyType

from perch.errors import ConfigurationError

HTML_TYPE = "text/html"

DEFAULT_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "html": "text/html",
        "css": "text/css",
        "js": "application/javascript",
        "png": "image/png",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "gif": "image/gif",
        "json": "application/json",
        "xml": "application/xml",
        "wasm": "application/wasm",
    }
)


def extension_of(url_path: str) -> str:
    """Return the extension of the last path segment, without the dot.

    Returns ``""`` when the segment has no extension.  Dotfiles such as
    ``/.env`` and names ending in a bare dot have none::

        extension_of("/css/main.css")  # "css"
        extension_of("/about")         # ""
        extension_of("/.env")          # ""
    """
    return posixpath.splitext(url_path)[1][1:]


def freeze_mime_table(types: Mapping[str, str]) -> Mapping[str, str]:
    """Validate a MIME table and return a read-only copy.

    Raises:
        ConfigurationError: If a key is empty, non-ASCII, contains a dot,
            or is not lowercase, or if a value is empty.
    """
    for extension, mime_type in types.items():
        if not extension or not extension.isascii() or "." in extension:
            msg = f"Invalid extension {extension!r}: expected a non-empty ASCII name without dots"
            raise ConfigurationError(msg)
        if extension != extension.lower():
            msg = f"Invalid extension {extension!r}: table keys must be lowercase"
            raise ConfigurationError(msg)
        if not mime_type:
            msg = f"Empty MIME type for extension {extension!r}"
            raise ConfigurationError(msg)
    return MappingProxyType(dict(types))
