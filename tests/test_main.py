"""Tests for the process entrypoint."""

import socket

import pytest

import strings_server.__main__ as entrypoint


@pytest.fixture
def occupied_port():
    """Hold a listening socket so the server cannot bind the same port."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    yield sock.getsockname()[1]
    sock.close()


def test_exits_when_the_port_is_taken(occupied_port, monkeypatch):
    monkeypatch.setattr(entrypoint, "LISTEN_PORT", occupied_port)
    monkeypatch.setattr(entrypoint.settings, "HOST", "127.0.0.1")

    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main()

    assert exc_info.value.code == 1


def test_serves_the_app_on_the_fixed_port(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    entrypoint.main()

    assert calls[0]["port"] == 8080
    assert calls[0]["host"] == entrypoint.settings.HOST
