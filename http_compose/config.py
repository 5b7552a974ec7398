from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass


@dataclass
class ComposeConfig:
    charset: str
    log_level: str


def load_config() -> ComposeConfig:
    charset = os.environ.get("HTTP_COMPOSE_CHARSET", "UTF-8").strip()
    log_level = os.environ.get("HTTP_COMPOSE_LOG_LEVEL", "WARNING").strip().upper()
    try:
        codecs.lookup(charset)
    except LookupError as exc:
        raise ValueError(f"HTTP_COMPOSE_CHARSET names an unknown charset: {charset!r}") from exc
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"HTTP_COMPOSE_LOG_LEVEL is not a logging level: {log_level!r}")
    return ComposeConfig(charset=charset, log_level=log_level)


__all__ = ["ComposeConfig", "load_config"]
