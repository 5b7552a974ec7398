"""Header decorators.

``WithHeaders`` and ``WithHeader`` append literally and never deduplicate.
``WithType`` is the exception: it replaces any ``Content-Type`` regardless of
the case of its name.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import CompositionError
from .fields import check_single_line, has_name, header_name, make_header_line, parse_header_line
from .response import Response

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"

TYPE_HTML = "text/html"
TYPE_JSON = "application/json"
TYPE_XML = "text/xml"
TYPE_TEXT = "text/plain"


def _log_duplicates(existing: Tuple[str, ...], added: Sequence[str]) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    seen = {header_name(line) for line in existing}
    for line in added:
        name = header_name(line)
        if name in seen:
            logger.debug("appending duplicate header %r", line)
        seen.add(name)


@dataclass(frozen=True, slots=True)
class WithHeaders(Response):
    """Appends literal ``Name: value`` lines after the headers of ``origin``."""

    origin: Response
    lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.lines, str):
            raise CompositionError("header lines must be a sequence of strings, not a single string")
        lines = tuple(parse_header_line(raw) for raw in self.lines)
        if not lines:
            raise CompositionError("at least one header line is required")
        object.__setattr__(self, "lines", lines)

    def status_line(self) -> str:
        return self.origin.status_line()

    def headers(self) -> Tuple[str, ...]:
        existing = self.origin.headers()
        _log_duplicates(existing, self.lines)
        return existing + self.lines

    def body(self) -> bytes:
        return self.origin.body()


@dataclass(frozen=True, slots=True)
class WithHeader(Response):
    """Appends a single header built from a name and a value."""

    origin: Response
    name: str
    value: str

    def __post_init__(self) -> None:
        # validates both parts
        make_header_line(self.name, self.value)

    def line(self) -> str:
        return make_header_line(self.name, self.value)

    def status_line(self) -> str:
        return self.origin.status_line()

    def headers(self) -> Tuple[str, ...]:
        existing = self.origin.headers()
        added = (self.line(),)
        _log_duplicates(existing, added)
        return existing + added

    def body(self) -> bytes:
        return self.origin.body()


@dataclass(frozen=True, slots=True)
class WithoutHeader(Response):
    """Drops every header whose name matches ``name``, ignoring case."""

    origin: Response
    name: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise CompositionError("header name must not be empty")

    def status_line(self) -> str:
        return self.origin.status_line()

    def headers(self) -> Tuple[str, ...]:
        return tuple(line for line in self.origin.headers() if not has_name(line, self.name))

    def body(self) -> bytes:
        return self.origin.body()


@dataclass(frozen=True, slots=True)
class WithType(Response):
    """Replaces the ``Content-Type`` of ``origin``.

    The new header always goes last. A ``; charset=`` suffix is only rendered
    when ``charset`` is given, exactly as it was spelled by the caller.
    """

    origin: Response
    media_type: str
    charset: Optional[str] = None

    def __post_init__(self) -> None:
        media_type = self.media_type.strip()
        if not media_type:
            raise CompositionError("media type must not be empty")
        check_single_line(media_type, "media type")
        object.__setattr__(self, "media_type", media_type)
        if self.charset is not None:
            charset = self.charset.strip()
            try:
                codecs.lookup(charset)
            except LookupError as exc:
                raise CompositionError(f"unknown charset: {self.charset!r}") from exc
            object.__setattr__(self, "charset", charset)

    @classmethod
    def html(cls, origin: Response, charset: Optional[str] = None) -> "WithType":
        return cls(origin, TYPE_HTML, charset)

    @classmethod
    def json(cls, origin: Response, charset: Optional[str] = None) -> "WithType":
        return cls(origin, TYPE_JSON, charset)

    @classmethod
    def xml(cls, origin: Response, charset: Optional[str] = None) -> "WithType":
        return cls(origin, TYPE_XML, charset)

    @classmethod
    def text(cls, origin: Response, charset: Optional[str] = None) -> "WithType":
        return cls(origin, TYPE_TEXT, charset)

    def value(self) -> str:
        if self.charset is None:
            return self.media_type
        return f"{self.media_type}; charset={self.charset}"

    def status_line(self) -> str:
        return self.origin.status_line()

    def headers(self) -> Tuple[str, ...]:
        return WithHeader(WithoutHeader(self.origin, CONTENT_TYPE), CONTENT_TYPE, self.value()).headers()

    def body(self) -> bytes:
        return self.origin.body()


__all__ = [
    "CONTENT_TYPE",
    "TYPE_HTML",
    "TYPE_JSON",
    "TYPE_TEXT",
    "TYPE_XML",
    "WithHeader",
    "WithHeaders",
    "WithType",
    "WithoutHeader",
]
