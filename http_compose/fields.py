"""Helpers for literal header lines.

Header lines are stored as the exact text that goes on the wire. Names are
only ever looked at for the few decorators with replace semantics.
"""

from __future__ import annotations

import re

from .errors import CompositionError

TOKEN_PATTERN: re.Pattern = re.compile(r"^[!#$%&'*+\-.\^_`|~0-9A-Za-z]+$")


def check_single_line(value: str, what: str) -> None:
    if "\r" in value or "\n" in value:
        raise CompositionError(f"{what} must not contain line breaks: {value!r}")
    try:
        value.encode("iso-8859-1")
    except UnicodeEncodeError as exc:
        raise CompositionError(f"{what} is not ISO-8859-1 text: {value!r}") from exc


def make_header_line(name: str, value: str) -> str:
    """Build ``Name: value`` from a trimmed name and value.

    The name keeps its case. An empty value renders as ``Name:``.
    """

    name = name.strip()
    value = value.strip()
    if not TOKEN_PATTERN.match(name):
        raise CompositionError(f"invalid header name: {name!r}")
    check_single_line(value, f"value of header {name}")
    if not value:
        return f"{name}:"
    return f"{name}: {value}"


def parse_header_line(line: str) -> str:
    if ":" not in line:
        raise CompositionError(f"header {line!r} has no ':' separator")
    name, value = line.split(":", 1)
    return make_header_line(name, value)


def header_name(line: str) -> str:
    """Case-folded name of a header line, used for case-insensitive matching."""

    return line.split(":", 1)[0].strip().casefold()


def has_name(line: str, name: str) -> bool:
    return header_name(line) == name.strip().casefold()


__all__ = [
    "TOKEN_PATTERN",
    "check_single_line",
    "has_name",
    "header_name",
    "make_header_line",
    "parse_header_line",
]
