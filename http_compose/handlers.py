from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Tuple

from .errors import CompositionError
from .fields import make_header_line, parse_header_line
from .headers import WithHeader, WithHeaders
from .response import EmptyResponse, Response

logger = logging.getLogger(__name__)


class Handler(ABC):
    """Produces a response for an opaque request object."""

    __slots__ = ()

    @abstractmethod
    def handle(self, request: Any = None) -> Response:
        ...


@dataclass(frozen=True, slots=True)
class EmptyHandler(Handler):
    def handle(self, request: Any = None) -> Response:
        return EmptyResponse()


@dataclass(frozen=True, slots=True)
class FixedHandler(Handler):
    """Answers every request with the same response."""

    response: Response

    def handle(self, request: Any = None) -> Response:
        return self.response


@dataclass(frozen=True, slots=True)
class FunctionHandler(Handler):
    func: Callable[[Any], Response]

    def handle(self, request: Any = None) -> Response:
        response = self.func(request)
        if not isinstance(response, Response):
            raise CompositionError(f"handler function returned {type(response).__name__}, not a Response")
        return response


@dataclass(frozen=True, slots=True)
class WithHeadersHandler(Handler):
    """Adds fixed header lines to every response of ``origin``.

    ``with_header`` returns a copy that also appends one extra ``name: value``
    header after the fixed ones; the instance it was called on is unchanged.
    """

    origin: Handler
    lines: Tuple[str, ...] = ()
    override: Optional[Tuple[str, str]] = None

    def __post_init__(self) -> None:
        if isinstance(self.lines, str):
            raise CompositionError("header lines must be a sequence of strings, not a single string")
        object.__setattr__(self, "lines", tuple(parse_header_line(raw) for raw in self.lines))
        if self.override is not None:
            if (
                not isinstance(self.override, (tuple, list))
                or len(self.override) != 2
                or not all(isinstance(part, str) for part in self.override)
            ):
                raise CompositionError(f"override must be a (name, value) pair of strings, got {self.override!r}")
            name, value = self.override
            make_header_line(name, value)
            object.__setattr__(self, "override", (name, value))

    def with_header(self, name: str, value: str) -> "WithHeadersHandler":
        return replace(self, override=(name, value))

    def handle(self, request: Any = None) -> Response:
        response = self.origin.handle(request)
        if self.lines:
            response = WithHeaders(response, self.lines)
        if self.override is not None:
            name, value = self.override
            response = WithHeader(response, name, value)
        logger.debug(
            "added %d fixed header(s)%s",
            len(self.lines),
            " and an override" if self.override is not None else "",
        )
        return response


__all__ = [
    "EmptyHandler",
    "FixedHandler",
    "FunctionHandler",
    "Handler",
    "WithHeadersHandler",
]
