"""HTTP response values.

Perch sends exactly three kinds of response: a file (200), the uniform
not-found page (404) and an internal error (500).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response: status, content type and body."""

    body: str | bytes = b""
    status: int = 200
    content_type: str = "text/html"

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body


# Every resolution failure is answered with this exact response.
NOT_FOUND = Response(body="404: File not found", status=404, content_type="text/html")

INTERNAL_ERROR = Response(body="500: Internal server error", status=500, content_type="text/html")
