from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import CompositionError
from .fields import has_name, make_header_line
from .response import Response

CONTENT_LENGTH = "Content-Length"
DEFAULT_CHARSET = "UTF-8"


@dataclass(frozen=True, slots=True)
class WithBody(Response):
    """Sets the body of ``origin`` and keeps ``Content-Length`` in step with it.

    Text is encoded once, at construction, with ``charset`` (UTF-8 when not
    given). A ``Content-Length`` already present is rewritten where it stands;
    otherwise the header is appended after all others.
    """

    origin: Response
    content: Union[bytes, str]
    charset: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            charset = self.charset or DEFAULT_CHARSET
            try:
                encoded = self.content.encode(codecs.lookup(charset).name)
            except LookupError as exc:
                raise CompositionError(f"unknown charset: {charset!r}") from exc
            except UnicodeEncodeError as exc:
                raise CompositionError(f"body cannot be encoded as {charset}: {exc}") from exc
            object.__setattr__(self, "content", encoded)
        elif isinstance(self.content, (bytes, bytearray, memoryview)):
            object.__setattr__(self, "content", bytes(self.content))
        else:
            raise CompositionError(f"body must be bytes or str, got {type(self.content).__name__}")

    def status_line(self) -> str:
        return self.origin.status_line()

    def headers(self) -> Tuple[str, ...]:
        length = make_header_line(CONTENT_LENGTH, str(len(self.content)))
        result: list[str] = []
        replaced = False
        for line in self.origin.headers():
            if has_name(line, CONTENT_LENGTH):
                if not replaced:
                    result.append(length)
                    replaced = True
                continue
            result.append(line)
        if not replaced:
            result.append(length)
        return tuple(result)

    def body(self) -> bytes:
        return self.content


__all__ = ["CONTENT_LENGTH", "DEFAULT_CHARSET", "WithBody"]
