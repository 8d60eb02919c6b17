"""Shared fixtures: Flask test client and a fake system resolver."""
from __future__ import annotations

import socket

import pytest

from src.steamconnect import app as flask_app

_FAKE_ZONE = {
    "teamserver.example.com": [
        (socket.AF_INET, "203.0.113.7"),
        (socket.AF_INET, "203.0.113.8"),
        (socket.AF_INET6, "2001:db8::7"),
    ],
    "v6only.example.com": [(socket.AF_INET6, "2001:db8::42")],
}


def _fake_getaddrinfo(host, port, family=0, type=0, proto=0, flags=0):
    records = [
        (record_family, address)
        for record_family, address in _FAKE_ZONE.get(host, [])
        if family in (socket.AF_UNSPEC, record_family)
    ]
    if not records:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    results = []
    for record_family, address in records:
        sockaddr = (address, 0) if record_family == socket.AF_INET else (address, 0, 0, 0)
        results.append((record_family, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", sockaddr))
    return results


@pytest.fixture
def fake_dns(monkeypatch):
    """Replace the system resolver with a fixed zone and record lookups."""

    lookups: list[str] = []

    def recording_getaddrinfo(host, *args, **kwargs):
        lookups.append(host)
        return _fake_getaddrinfo(host, *args, **kwargs)

    monkeypatch.setattr(socket, "getaddrinfo", recording_getaddrinfo)
    return lookups


@pytest.fixture
def app(fake_dns):
    original_config = dict(flask_app.config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.config.clear()
    flask_app.config.update(original_config)


@pytest.fixture
def client(app):
    return app.test_client()
