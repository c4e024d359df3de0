"""ASGI handler: translates one ASGI HTTP request into a served file or a 404.

The only component that touches raw ASGI request scopes.  Logs the
request, runs the blocking resolver in a worker thread, and sends the
resulting Response back through ASGI send().
"""

import logging

import anyio

from perch._internal.asgi import HTTPScope, Receive, Scope, Send
from perch.http.response import INTERNAL_ERROR, NOT_FOUND, Response
from perch.resolver import NotFound, Resolution, Resolver, ServeFile
from perch.server.sender import send_response

logger = logging.getLogger("perch.server")


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    resolver: Resolver,
) -> None:
    """Process a single HTTP request.

    The method is logged but never changes resolution: ``POST /a.css``
    is served exactly like ``GET /a.css``.
    """
    if scope["type"] != "http":
        return

    request = HTTPScope.from_scope(scope)
    logger.info("%s %s", request.method, _display_target(request))

    try:
        result = await anyio.to_thread.run_sync(resolver.resolve, request.path)
        response = to_response(result, request)
    except Exception:
        logger.exception("Unhandled error serving %s %s", request.method, request.path)
        response = INTERNAL_ERROR

    await send_response(response, send)


def to_response(result: Resolution, request: HTTPScope) -> Response:
    """Build the HTTP response for a resolution result.

    Every ``NotFound`` produces the same response regardless of cause;
    the cause is only logged.
    """
    match result:
        case ServeFile(mime_type=mime_type, body=body):
            return Response(body=body, content_type=mime_type)
        case NotFound(reason=reason):
            logger.debug("404 %s %s (%s)", request.method, request.path, reason)
            return NOT_FOUND


def _display_target(request: HTTPScope) -> str:
    """Request target as the client sent it (path plus query string)."""
    if request.query_string:
        return f"{request.path}?{request.query_string.decode('latin-1')}"
    return request.path
