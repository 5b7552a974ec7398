"""Immutable HTTP response values.

A response is never edited in place. Every change is expressed by wrapping an
existing response in a decorator that holds a reference to it (``origin``) and
computes its own status line, headers or body at read time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from http import HTTPStatus
from typing import Dict, Optional, Tuple

from .errors import CompositionError
from .fields import check_single_line, parse_header_line

HTTP_VERSION = "HTTP/1.1"

# Reason phrases used by the framework; anything missing falls back to the
# IANA phrase known to ``http.HTTPStatus``.
REASONS: Dict[int, str] = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "No Content",
    301: "Moved Permanently",
    302: "Moved Temporarily",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Bad Method",
    406: "Not Acceptable",
    408: "Client Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Entity Too Large",
    414: "Request Too Long",
    415: "Unsupported Type",
    500: "Internal Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Unavailable",
    504: "Gateway Timeout",
    505: "Version Not Supported",
}


def reason_for(code: int) -> str:
    """Return the reason phrase rendered for ``code``."""

    reason = REASONS.get(code)
    if reason is not None:
        return reason
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown"


def format_status_line(code: int, reason: Optional[str] = None) -> str:
    return f"{HTTP_VERSION} {code} {reason if reason is not None else reason_for(code)}"


class Response(ABC):
    """Something that can be rendered as an HTTP/1.1 response."""

    __slots__ = ()

    @abstractmethod
    def status_line(self) -> str:
        ...

    @abstractmethod
    def headers(self) -> Tuple[str, ...]:
        ...

    @abstractmethod
    def body(self) -> bytes:
        ...

    def head(self) -> Tuple[str, ...]:
        """Status line followed by every header line, in composition order."""

        return (self.status_line(), *self.headers())


@dataclass(frozen=True, slots=True)
class EmptyResponse(Response):
    """``200 OK`` with no headers and no body; the innermost link of most chains."""

    def status_line(self) -> str:
        return format_status_line(200)

    def headers(self) -> Tuple[str, ...]:
        return ()

    def body(self) -> bytes:
        return b""


@dataclass(frozen=True, slots=True)
class FixedResponse(Response):
    """Response materialized from a literal status line, header lines and body."""

    line: str = format_status_line(200)
    lines: Tuple[str, ...] = ()
    content: bytes = b""

    def __post_init__(self) -> None:
        if not self.line.strip():
            raise CompositionError("status line must not be empty")
        check_single_line(self.line, "status line")
        if not isinstance(self.content, (bytes, bytearray)):
            raise CompositionError("content must be bytes")
        object.__setattr__(self, "lines", tuple(parse_header_line(raw) for raw in self.lines))
        object.__setattr__(self, "content", bytes(self.content))

    def status_line(self) -> str:
        return self.line

    def headers(self) -> Tuple[str, ...]:
        return self.lines

    def body(self) -> bytes:
        return self.content


@dataclass(frozen=True, slots=True)
class WithStatus(Response):
    """Replaces the status code and reason; headers and body pass through."""

    origin: Response
    code: int
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise CompositionError(f"status code must be an integer, got {self.code!r}")
        if not 100 <= self.code <= 999:
            raise CompositionError(f"status code {int(self.code)} is outside 100..999")
        object.__setattr__(self, "code", int(self.code))
        if self.reason is not None:
            check_single_line(self.reason, "reason phrase")
            if not self.reason.strip():
                raise CompositionError("reason phrase must not be blank")
            object.__setattr__(self, "reason", self.reason.strip())

    def status_line(self) -> str:
        return format_status_line(self.code, self.reason)

    def headers(self) -> Tuple[str, ...]:
        return self.origin.headers()

    def body(self) -> bytes:
        return self.origin.body()


__all__ = [
    "HTTP_VERSION",
    "REASONS",
    "EmptyResponse",
    "FixedResponse",
    "Response",
    "WithStatus",
    "reason_for",
    "format_status_line",
]
