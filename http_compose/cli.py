"""Compose a response from command line flags and print its wire form."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .body import WithBody
from .config import load_config
from .errors import CompositionError
from .headers import WithHeaders, WithType
from .render import BinarySink, write_response
from .response import EmptyResponse, Response, WithStatus

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-compose",
        description="Build an HTTP/1.1 response from decorators and write it to stdout.",
    )
    parser.add_argument("--status", type=int, help="Status code, e.g. 404.")
    parser.add_argument("--reason", help="Reason phrase to use instead of the default for --status.")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Header line to append; may be repeated.",
    )
    parser.add_argument("--type", dest="media_type", help="Content-Type media type.")
    parser.add_argument("--charset", help="Charset suffix for --type.")
    parser.add_argument("--body", help="Body text, encoded with --charset or else HTTP_COMPOSE_CHARSET.")
    return parser


def compose(args: argparse.Namespace, charset: str) -> Response:
    response: Response = EmptyResponse()
    if args.status is not None:
        response = WithStatus(response, args.status, args.reason)
    elif args.reason is not None:
        raise CompositionError("--reason requires --status")
    if args.header:
        response = WithHeaders(response, args.header)
    if args.body is not None:
        response = WithBody(response, args.body, args.charset or charset)
    if args.media_type is not None:
        response = WithType(response, args.media_type, args.charset)
    elif args.charset is not None:
        raise CompositionError("--charset requires --type")
    return response


def main(argv: Optional[Sequence[str]] = None, out: Optional[BinarySink] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config()
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        response = compose(args, config.charset)
    except CompositionError as exc:
        logger.warning("rejected response composition: %s", exc)
        parser.error(str(exc))

    write_response(response, out if out is not None else sys.stdout.buffer)
    return 0


__all__ = ["build_parser", "compose", "main"]
