"""ASGI response sending: translates a perch Response to ASGI messages."""

from perch._internal.asgi import Send
from perch.http.response import Response


async def send_response(response: Response, send: Send) -> None:
    """Translate a perch Response into ASGI send() calls.

    Always sends ``Content-Type`` and ``Content-Length``; the body goes
    out in a single message.
    """
    body = response.body_bytes

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": [
                (b"content-type", response.content_type.encode("latin-1")),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
