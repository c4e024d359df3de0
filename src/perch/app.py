"""The perch ASGI application.

Immutable after construction: the resolver (root directory and MIME
table) is built once from a ``SiteConfig`` and shared by every request.
"""

import logging
from dataclasses import replace

from perch._internal.asgi import Receive, Scope, Send
from perch.config import SiteConfig
from perch.resolver import INDEX_FILE, Resolver
from perch.server.handler import handle_request

logger = logging.getLogger("perch.server")


class StaticSite:
    """Serve a directory of static files over HTTP.

    An ASGI 3.0 application; run it with ``site.run()`` or hand it to
    any ASGI server::

        site = StaticSite(SiteConfig(root="public", port=8000))
        site.run()

    Thread safety:
        Holds no mutable state after ``__init__``.  Concurrent requests
        share the resolver without locking.
    """

    __slots__ = ("_resolver", "config")

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self._resolver = Resolver(self.config)

    @property
    def resolver(self) -> Resolver:
        """The resolver shared by all requests."""
        return self._resolver

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start serving and block until the server stops.

        Args:
            host: Override bind host.
            port: Override bind port.

        Raises:
            ConfigurationError: If an override is invalid.
            OSError: If the listening socket cannot be bound.
            ImportError: If the pounce server is not installed.
        """
        from perch.server.runner import run_server

        bind = replace(
            self.config,
            host=self.config.host if host is None else host,
            port=self.config.port if port is None else port,
        )

        logger.info("Serving %s at http://%s:%s", self._resolver.root, bind.host, bind.port)
        run_server(self, bind.host, bind.port, log_level=bind.log_level)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler.  Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, resolver=self._resolver)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Startup only reports on the root directory; a missing root is
        not fatal, every request simply resolves to a 404.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self._check_root()
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _check_root(self) -> None:
        root = self._resolver.root
        if not root.is_dir():
            logger.warning("Root directory %s does not exist; every request will 404", root)
        elif not (root / INDEX_FILE).is_file():
            logger.warning("%s not found in %s; / will 404", INDEX_FILE, root)
