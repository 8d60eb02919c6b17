"""Translate request paths into ``steam://connect`` URIs."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .connect_request import ConnectRequest, ConnectRequestError, parse_connect_path
from .resolver import DEFAULT_ADDRESS_FAMILY, resolve_host

__all__ = [
    "CONNECT_URI_PREFIX",
    "ResolvedTarget",
    "UnresolvableHostError",
    "build_connect_uri",
    "resolve_request",
    "translate_path",
]

logger = logging.getLogger(__name__)

CONNECT_URI_PREFIX = "steam://connect/"


class UnresolvableHostError(ConnectRequestError):
    """Raised when the requested host cannot be resolved to an address."""

    def __init__(self, host: str, reason: str | None = None) -> None:
        self.host = host
        self.reason = reason
        super().__init__(f"Invalid hostname or domain - '{host}'")


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """A connect request whose host has been replaced by an IP address."""

    ip: str
    port: int
    password: str | None = None

    @property
    def connect_uri(self) -> str:
        return build_connect_uri(self)


def build_connect_uri(target: ResolvedTarget) -> str:
    """Return the connect URI for ``target``; the password is appended verbatim."""

    uri = f"{CONNECT_URI_PREFIX}{target.ip}:{target.port}"
    if target.password:
        uri = f"{uri}/{target.password}"
    return uri


def resolve_request(request: ConnectRequest, family: str = DEFAULT_ADDRESS_FAMILY) -> ResolvedTarget:
    """Resolve the host of ``request``.

    Raises:
        UnresolvableHostError: If the host is not an IP literal and the
            lookup fails.
    """

    resolution = resolve_host(request.host, family=family)
    if not resolution.ok:
        raise UnresolvableHostError(request.host, resolution.error)

    return ResolvedTarget(ip=resolution.address, port=request.port, password=request.password)


def translate_path(path: str, family: str = DEFAULT_ADDRESS_FAMILY) -> ResolvedTarget:
    """Parse and resolve ``path`` in one step.

    Raises:
        MalformedRequestError: If ``path`` is not ``host:port[/password]``.
        UnresolvableHostError: If the host cannot be resolved.
    """

    target = resolve_request(parse_connect_path(path), family=family)
    logger.info("Translated request for %s:%s", target.ip, target.port)
    return target


if __name__ == "__main__":  # pragma: no cover - diagnostic helper
    import argparse
    import sys

    from .resolver import ADDRESS_FAMILIES

    logging.basicConfig(level=logging.DEBUG)

    parser = argparse.ArgumentParser(description="Translate a request path into a connect URI")
    parser.add_argument("path", help="Request path, e.g. 116.202.245.30:27015/password")
    parser.add_argument(
        "--family",
        choices=sorted(ADDRESS_FAMILIES),
        default=DEFAULT_ADDRESS_FAMILY,
        help="Address family used for DNS lookups (default: %(default)s)",
    )

    args = parser.parse_args()

    try:
        print(translate_path(args.path, family=args.family).connect_uri)
    except ConnectRequestError as exc:
        print("Error:", exc)
        sys.exit(1)
