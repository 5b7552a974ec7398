"""Flattening of a composed response into HTTP/1.1 wire text.

Rendering only reads the chain: it never reorders, deduplicates or validates
headers, so the same response renders to the same bytes every time.
"""

from __future__ import annotations

from typing import Protocol

from .response import Response

CRLF = "\r\n"
HEAD_ENCODING = "iso-8859-1"


class BinarySink(Protocol):
    def write(self, data: bytes) -> object:
        """Accept a chunk of rendered bytes."""


def render_head(response: Response) -> str:
    """Status line and headers, each CRLF terminated, plus the blank line."""

    return "".join(f"{line}{CRLF}" for line in response.head()) + CRLF


def render(response: Response) -> bytes:
    return render_head(response).encode(HEAD_ENCODING) + response.body()


def render_text(response: Response, encoding: str = "utf-8") -> str:
    """Rendering as text; body bytes that do not decode become U+FFFD."""

    return render_head(response) + response.body().decode(encoding, errors="replace")


def write_response(response: Response, sink: BinarySink) -> None:
    head = render_head(response)
    body = response.body()
    sink.write(head.encode(HEAD_ENCODING))
    if body:
        sink.write(body)


__all__ = [
    "BinarySink",
    "CRLF",
    "HEAD_ENCODING",
    "render",
    "render_head",
    "render_text",
    "write_response",
]
