from __future__ import annotations

from http import HTTPStatus

import pytest

from http_compose import CompositionError, EmptyResponse, FixedResponse, WithStatus, render


def test_empty_response_is_200_without_headers_or_body() -> None:
    response = EmptyResponse()

    assert response.status_line() == "HTTP/1.1 200 OK"
    assert response.headers() == ()
    assert response.body() == b""
    assert render(response) == b"HTTP/1.1 200 OK\r\n\r\n"


def test_with_status_uses_framework_reason_phrases() -> None:
    assert WithStatus(EmptyResponse(), 500).status_line() == "HTTP/1.1 500 Internal Error"
    assert WithStatus(EmptyResponse(), 404).status_line() == "HTTP/1.1 404 Not Found"
    assert WithStatus(EmptyResponse(), HTTPStatus.NO_CONTENT).status_line() == "HTTP/1.1 204 No Content"


def test_with_status_falls_back_to_standard_then_unknown_phrase() -> None:
    assert WithStatus(EmptyResponse(), 418).status_line() == "HTTP/1.1 418 I'm a Teapot"
    assert WithStatus(EmptyResponse(), 799).status_line() == "HTTP/1.1 799 Unknown"


def test_with_status_accepts_explicit_reason() -> None:
    response = WithStatus(EmptyResponse(), 200, " Fine ")

    assert response.status_line() == "HTTP/1.1 200 Fine"


def test_with_status_keeps_headers_and_body() -> None:
    origin = FixedResponse("HTTP/1.1 200 OK", ("X-Trace: abc",), b"payload")
    response = WithStatus(origin, 201)

    assert response.headers() == ("X-Trace: abc",)
    assert response.body() == b"payload"


def test_with_status_replaces_previous_status() -> None:
    response = WithStatus(WithStatus(EmptyResponse(), 500), 302)

    assert response.status_line() == "HTTP/1.1 302 Moved Temporarily"


@pytest.mark.parametrize("code", [99, 1000, -1, 0])
def test_with_status_rejects_out_of_range_codes(code: int) -> None:
    with pytest.raises(CompositionError):
        WithStatus(EmptyResponse(), code)


@pytest.mark.parametrize("code", [True, "200", 200.0])
def test_with_status_rejects_non_integer_codes(code) -> None:
    with pytest.raises(CompositionError):
        WithStatus(EmptyResponse(), code)


def test_with_status_rejects_reason_with_line_break() -> None:
    with pytest.raises(CompositionError):
        WithStatus(EmptyResponse(), 200, "OK\r\nX-Injected: yes")


def test_fixed_response_normalizes_header_lines() -> None:
    response = FixedResponse("HTTP/1.1 404 Not Found", ["Server :  tiny "], bytearray(b"nope"))

    assert response.status_line() == "HTTP/1.1 404 Not Found"
    assert response.headers() == ("Server: tiny",)
    assert response.body() == b"nope"


def test_fixed_response_rejects_empty_status_line() -> None:
    with pytest.raises(CompositionError):
        FixedResponse("  ")


def test_responses_are_immutable() -> None:
    response = WithStatus(EmptyResponse(), 404)

    with pytest.raises(AttributeError):
        response.code = 200  # type: ignore[misc]
    assert response.status_line() == "HTTP/1.1 404 Not Found"


@pytest.mark.parametrize("reason", ["", "   ", "\t"])
def test_with_status_rejects_blank_reason(reason: str) -> None:
    with pytest.raises(CompositionError):
        WithStatus(EmptyResponse(), 200, reason)
