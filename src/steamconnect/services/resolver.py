"""Hostname resolution for connect requests."""
from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass

__all__ = ["ADDRESS_FAMILIES", "DEFAULT_ADDRESS_FAMILY", "Resolution", "is_ip_literal", "resolve_host"]

logger = logging.getLogger(__name__)

ADDRESS_FAMILIES: dict[str, int] = {
    "ipv4": socket.AF_INET,
    "ipv6": socket.AF_INET6,
    "any": socket.AF_UNSPEC,
}
DEFAULT_ADDRESS_FAMILY = "ipv4"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a single host.

    Exactly one of ``address`` and ``error`` is set.
    """

    host: str
    address: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.address is not None


def is_ip_literal(host: str) -> bool:
    """Return ``True`` when ``host`` is an IPv4 or IPv6 address literal."""

    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def resolve_host(host: str, family: str = DEFAULT_ADDRESS_FAMILY) -> Resolution:
    """Resolve ``host`` to the first address the system resolver returns.

    IP literals are returned unchanged without a lookup. Lookup failures are
    reported through :attr:`Resolution.error` rather than raised.
    """

    if is_ip_literal(host):
        return Resolution(host=host, address=host)

    try:
        address_family = ADDRESS_FAMILIES[family]
    except KeyError:
        raise ValueError(
            f"Unknown address family '{family}'; expected one of: "
            + ", ".join(sorted(ADDRESS_FAMILIES))
        ) from None

    try:
        results = socket.getaddrinfo(host, None, address_family, socket.SOCK_STREAM)
    except (OSError, ValueError) as exc:
        logger.debug("Resolution of %s failed: %s", host, exc)
        return Resolution(host=host, error=str(exc) or type(exc).__name__)

    if not results:
        return Resolution(host=host, error="No addresses returned.")

    # (family, type, proto, canonname, sockaddr); sockaddr[0] is the address.
    address = results[0][4][0]
    logger.debug("Resolved %s to %s (%d candidates)", host, address, len(results))
    return Resolution(host=host, address=address)
