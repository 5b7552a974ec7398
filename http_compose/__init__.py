"""Immutable HTTP response composition.

Responses are built by wrapping decorators around a base response and then
flattened into wire text by the renderer.
"""

from .body import WithBody
from .errors import CompositionError
from .handlers import EmptyHandler, FixedHandler, FunctionHandler, Handler, WithHeadersHandler
from .headers import WithHeader, WithHeaders, WithoutHeader, WithType
from .render import render, render_head, render_text, write_response
from .response import EmptyResponse, FixedResponse, Response, WithStatus

__all__ = [
    "CompositionError",
    "EmptyHandler",
    "EmptyResponse",
    "FixedHandler",
    "FixedResponse",
    "FunctionHandler",
    "Handler",
    "Response",
    "WithBody",
    "WithHeader",
    "WithHeaders",
    "WithHeadersHandler",
    "WithStatus",
    "WithType",
    "WithoutHeader",
    "render",
    "render_head",
    "render_text",
    "write_response",
]
