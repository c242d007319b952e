"""HTTP transport capability and request execution."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from radioctrl import __version__
from radioctrl.api.errors import TransportError

logger = logging.getLogger(__name__)

# Sent with every request; radio-browser asks clients to identify themselves
USER_AGENT = f"radioctrl/{__version__}"

# Default request timeout in seconds for the production transport
DEFAULT_TIMEOUT = 10.0


class HTTPTransport(Protocol):
    """Capability that executes one HTTP request.

    httpx.Client satisfies this protocol; tests pass a client built on
    httpx.MockTransport or any object with a matching send().
    """

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send request and return the response."""
        ...


def create_transport(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create the production transport.

    Redirects are not followed so that the chosen mirror stays fixed.
    """
    return httpx.Client(timeout=timeout, follow_redirects=False)


def build_request(
    method: str,
    url: str | httpx.URL,
    params: dict[str, str] | None = None,
) -> httpx.Request:
    """Build a request carrying the JSON Accept header and User-Agent."""
    return httpx.Request(
        method,
        url,
        params=params,
        headers={
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        },
    )


def invoke(transport: HTTPTransport, request: httpx.Request) -> httpx.Response:
    """Execute a request and read its body.

    Non-2xx statuses are returned like any other response; deciding what
    they mean is left to the decoder.

    Args:
        transport: Transport to send through.
        request: Request to send.

    Returns:
        Response with its body loaded.

    Raises:
        TransportError: If sending or reading the body fails (no retry).
    """
    logger.debug("%s %s", request.method, request.url)
    try:
        response = transport.send(request)
        try:
            response.read()
        finally:
            response.close()
    except (httpx.HTTPError, OSError) as e:
        raise TransportError(str(e) or type(e).__name__) from e

    logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
    return response
