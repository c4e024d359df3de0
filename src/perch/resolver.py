"""Request resolver: URL path to file on disk, or not found.

The only component with real correctness hazards.  Given a fixed root
directory and MIME table, maps an untrusted request path to either a
``ServeFile`` or a ``NotFound``.

Resolution order:

1. Extract the extension of the last path segment.
2. Unknown extension: not found, before touching the filesystem.
3. ``/`` maps to ``index.html``.  A path with an extension maps to
   itself.  An extensionless path tries ``path.html`` then
   ``path/index.html``.
4. The candidate is joined to the root, normalized (``..`` and symlinks
   resolved) and must still lie inside the root.
5. The file is read; any I/O failure is a not found.

Security: containment is checked on path segments with
``Path.is_relative_to``, so ``/srv/site-evil`` never passes for root
``/srv/site``.  Symlinks are resolved before the check, so a link
pointing outside the root is rejected.

Concurrency: a ``Resolver`` holds only immutable state and is safe to
share across threads.  The ``.html`` existence probe and the later read
are separate filesystem operations; a file changing in between yields a
transient 404 or the newer content.
"""

import posixpath
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias

from perch.config import SiteConfig
from perch.mime import HTML_TYPE, extension_of

INDEX_FILE = "index.html"


class Reason(StrEnum):
    """Why a path resolved to nothing.  Logged, never sent to clients."""

    UNSUPPORTED_EXTENSION = "unsupported extension"
    OUTSIDE_ROOT = "outside root"
    MISSING = "missing"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class ServeFile:
    """A file to serve: absolute path, MIME type and (once read) its bytes."""

    path: Path
    mime_type: str
    body: bytes = field(default=b"", repr=False)


@dataclass(frozen=True, slots=True)
class NotFound:
    """Resolution failed.  Every cause produces the same response."""

    reason: Reason


Resolution: TypeAlias = ServeFile | NotFound


class Resolver:
    """Resolve request paths to files beneath a fixed root directory.

    Usage::

        resolver = Resolver(SiteConfig(root="public"))
        match resolver.resolve("/about"):
            case ServeFile(path=path, mime_type=mime_type, body=body):
                ...
            case NotFound():
                ...
    """

    __slots__ = ("_mime_types", "_root")

    def __init__(self, config: SiteConfig) -> None:
        self._root = config.root_dir
        self._mime_types = config.mime_types

    @property
    def root(self) -> Path:
        """The normalized root directory."""
        return self._root

    def locate(self, url_path: str) -> Resolution:
        """Map a request path to a contained file path, without reading it.

        Performs the extension check, the extensionless fallback probe
        and the containment check.  The returned ``ServeFile`` has an
        empty body.
        """
        extension = extension_of(url_path)
        if extension:
            mime_type = self._mime_types.get(extension.lower())
            if mime_type is None:
                return NotFound(Reason.UNSUPPORTED_EXTENSION)
        else:
            mime_type = HTML_TYPE

        # Leading slashes would make the join absolute.
        relative = url_path.lstrip("/")
        if url_path == "/":
            candidate = INDEX_FILE
        elif extension:
            candidate = relative
        elif self._exists(relative + ".html"):
            candidate = relative + ".html"
        else:
            candidate = posixpath.join(relative, INDEX_FILE)

        try:
            file_path = (self._root / candidate).resolve()
        except (OSError, RuntimeError, ValueError):
            # RuntimeError: symlink loops on Python 3.12.
            return NotFound(Reason.UNREADABLE)

        if not file_path.is_relative_to(self._root):
            return NotFound(Reason.OUTSIDE_ROOT)

        return ServeFile(path=file_path, mime_type=mime_type)

    def resolve(self, url_path: str) -> Resolution:
        """Map a request path to a file and read it.

        Blocking: performs filesystem I/O.  Async callers should run it
        in a worker thread.
        """
        result = self.locate(url_path)
        if isinstance(result, NotFound):
            return result

        try:
            body = result.path.read_bytes()
        except FileNotFoundError:
            return NotFound(Reason.MISSING)
        except (OSError, ValueError):
            # Directories, permission errors, invalid names.
            return NotFound(Reason.UNREADABLE)

        return ServeFile(path=result.path, mime_type=result.mime_type, body=body)

    def _exists(self, relative: str) -> bool:
        """Whether ``relative`` names an existing entry beneath the root."""
        try:
            return (self._root / relative).exists()
        except (OSError, ValueError):
            return False
