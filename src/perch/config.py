"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, passed
explicitly to the resolver and the ASGI app.  No module-level state.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from perch.errors import ConfigurationError
from perch.mime import DEFAULT_MIME_TYPES, freeze_mime_table

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Static site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(root="site", port=3000)
    """

    # Files
    root: str | Path = "public"
    mime_types: Mapping[str, str] = field(default_factory=lambda: DEFAULT_MIME_TYPES)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not self.host:
            msg = "host must not be empty"
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"port {self.port} is out of range (0-65535)"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            raise ConfigurationError(msg)
        # Frozen: bypass __setattr__ to store the validated read-only table.
        object.__setattr__(self, "mime_types", freeze_mime_table(self.mime_types))

    @property
    def root_dir(self) -> Path:
        """The root directory as an absolute, normalized path."""
        return Path(self.root).resolve()
