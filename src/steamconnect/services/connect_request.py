"""Parsing of ``host:port[/password]`` request paths."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

__all__ = [
    "ConnectRequest",
    "ConnectRequestError",
    "MalformedRequestError",
    "parse_connect_path",
]

logger = logging.getLogger(__name__)

# The password keeps any further slashes; ``.`` stops at a newline.
_CONNECT_PATH_PATTERN = re.compile(r"([^:/]+):([0-9]+)(?:/(.*))?", re.ASCII)
_MIN_PORT = 1
_MAX_PORT = 65535


class ConnectRequestError(ValueError):
    """Base class for requests that cannot be turned into a connect URI."""


class MalformedRequestError(ConnectRequestError):
    """Raised when a path does not have the ``host:port[/password]`` shape."""


@dataclass(frozen=True, slots=True)
class ConnectRequest:
    """Server address and optional password parsed from a request path."""

    host: str
    port: int
    password: str | None = None


def parse_connect_path(path: str) -> ConnectRequest:
    """Parse ``path`` into a :class:`ConnectRequest`.

    Args:
        path: The request path. Leading slashes are ignored.

    Returns:
        The parsed request. An empty password segment (``host:port/``) is
        reported as no password. The port is held as an integer, so leading
        zeros are dropped (``027015`` becomes ``27015``).

    Raises:
        MalformedRequestError: If the path does not match the grammar or the
            port lies outside 1-65535.
    """

    candidate = path.lstrip("/")
    match = _CONNECT_PATH_PATTERN.fullmatch(candidate)
    if match is None:
        raise MalformedRequestError("Request path is not of the form host:port[/password].")

    host, raw_port, password = match.groups()
    # Leading zeros are dropped; more than five significant digits is out of range.
    significant = raw_port.lstrip("0")
    if len(significant) > len(str(_MAX_PORT)):
        raise MalformedRequestError(f"Port is outside {_MIN_PORT}-{_MAX_PORT}.")

    port = int(significant or "0")
    if not _MIN_PORT <= port <= _MAX_PORT:
        raise MalformedRequestError(f"Port {port} is outside {_MIN_PORT}-{_MAX_PORT}.")

    request = ConnectRequest(host=host, port=port, password=password or None)
    logger.debug("Parsed connect request for %s:%s", request.host, request.port)
    return request
