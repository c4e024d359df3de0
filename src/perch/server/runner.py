"""Server startup.

Starts a pounce ASGI server with the live StaticSite object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perch.app import StaticSite


def run_server(
    app: StaticSite,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given site and block.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but perch has a live ``StaticSite`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (StaticSite instance).
        host: Bind host address.
        port: Bind port number.
        log_level: Server log level (debug, info, warning, error, critical).

    Raises:
        OSError: If the listening socket cannot be bound.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
