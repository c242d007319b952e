"""Mirror resolution and base URL construction.

radio-browser.info publishes one DNS name that resolves to every mirror.
The client resolves it once, keeps the first address and talks to that
mirror for its whole lifetime.
"""

from __future__ import annotations

import logging
import socket
from typing import Protocol

import httpx

from radioctrl.api.errors import ResolutionError, URLConstructionError

logger = logging.getLogger(__name__)

# DNS name answering with all directory mirrors
API_HOSTNAME = "all.api.radio-browser.info"

# Path prefix of the JSON API on every mirror
API_PATH = "/json"


class NameResolver(Protocol):
    """Capability that resolves a hostname to address strings."""

    def lookup_ip(self, host: str) -> list[str]:
        """Return the addresses for host, in resolver order."""
        ...


class SocketResolver:
    """NameResolver backed by the system resolver (getaddrinfo)."""

    def lookup_ip(self, host: str) -> list[str]:
        """Resolve host to unique IPv4/IPv6 addresses.

        Raises:
            socket.gaierror: If the name cannot be resolved.
        """
        infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)
        addresses: list[str] = []
        for _family, _type, _proto, _canonname, sockaddr in infos:
            address = str(sockaddr[0])
            if address not in addresses:
                addresses.append(address)
        return addresses


def resolve_mirrors(resolver: NameResolver, hostname: str = API_HOSTNAME) -> list[str]:
    """Resolve the directory hostname to its mirror addresses.

    The resolver is invoked exactly once.

    Args:
        resolver: Resolution capability.
        hostname: Name to resolve.

    Returns:
        Non-empty list of addresses in resolver order.

    Raises:
        ResolutionError: If resolution fails (message preserved) or
            returns no addresses.
    """
    try:
        addresses = list(resolver.lookup_ip(hostname))
    except Exception as e:  # noqa: BLE001
        raise ResolutionError(str(e)) from e

    if not addresses:
        raise ResolutionError(f"No addresses found for {hostname}")

    logger.debug("Resolved %s to %d mirror(s): %s", hostname, len(addresses), addresses)
    return addresses


def select_mirror(addresses: list[str]) -> str:
    """Pick the mirror to use: always the first address."""
    return addresses[0]


def format_host(address: str) -> str:
    """Format an address for a URL authority, bracketing IPv6 literals."""
    if ":" in address:
        return f"[{address}]"
    return address


def build_base_url(address: str) -> httpx.URL:
    """Build the API base URL for a mirror address.

    Args:
        address: IPv4/IPv6 literal or hostname.

    Returns:
        URL of the form http://<host>/json.

    Raises:
        URLConstructionError: If the address cannot form a valid authority.
    """
    raw = f"http://{format_host(address)}{API_PATH}"
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, ValueError) as e:
        raise URLConstructionError(f"Invalid mirror URL {raw!r}: {e}") from e

    # Reserved characters in the address ("@", "#", "?", "/") re-split the
    # URL into other components; anything but a clean host/path is invalid.
    if (
        url.host.lower() != address.lower()
        or url.path != API_PATH
        or url.userinfo
        or url.query
        or url.fragment
    ):
        raise URLConstructionError(f"Invalid mirror URL {raw!r}: address is not a valid host")

    return url
