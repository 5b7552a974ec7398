from __future__ import annotations


class CompositionError(ValueError):
    """Raised when a response or handler decorator receives malformed input."""


__all__ = ["CompositionError"]
