from __future__ import annotations

import io

import pytest

from http_compose.cli import main


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("HTTP_COMPOSE_CHARSET", "HTTP_COMPOSE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_main_writes_composed_response() -> None:
    out = io.BytesIO()

    code = main(
        ["--status", "500", "--body", "Error!", "--type", "text/html", "--header", "X-Req: 1 "],
        out=out,
    )

    assert code == 0
    assert out.getvalue() == (
        b"HTTP/1.1 500 Internal Error\r\n"
        b"X-Req: 1\r\n"
        b"Content-Length: 6\r\n"
        b"Content-Type: text/html\r\n"
        b"\r\n"
        b"Error!"
    )


def test_main_without_flags_writes_empty_response() -> None:
    out = io.BytesIO()

    assert main([], out=out) == 0
    assert out.getvalue() == b"HTTP/1.1 200 OK\r\n\r\n"


def test_main_encodes_body_with_configured_charset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HTTP_COMPOSE_CHARSET", "ISO-8859-1")
    out = io.BytesIO()

    main(["--body", "café"], out=out)

    assert out.getvalue() == b"HTTP/1.1 200 OK\r\nContent-Length: 4\r\n\r\ncaf\xe9"


@pytest.mark.parametrize(
    "argv",
    [
        ["--status", "42"],
        ["--header", "no separator"],
        ["--charset", "UTF-8"],
        ["--reason", "Fine"],
        ["--type", "text/plain", "--charset", "no-such-charset"],
    ],
)
def test_main_rejects_invalid_composition(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv, out=io.BytesIO())

    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_main_encodes_body_with_charset_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HTTP_COMPOSE_CHARSET", "UTF-8")
    out = io.BytesIO()

    main(["--type", "text/plain", "--charset", "ISO-8859-1", "--body", "café"], out=out)

    assert out.getvalue() == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Length: 4\r\n"
        b"Content-Type: text/plain; charset=ISO-8859-1\r\n"
        b"\r\n"
        b"caf\xe9"
    )
