"""radio-browser.info directory API client.

The client resolves the directory's DNS name once at construction, fixes
its base URL on the first mirror returned and then issues synchronous
requests through the injected transport.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from radioctrl.api.decoder import decode_click_result, decode_stations
from radioctrl.api.query import SearchRequest, StationQuery, encode_query
from radioctrl.api.resolver import (
    API_HOSTNAME,
    NameResolver,
    SocketResolver,
    build_base_url,
    resolve_mirrors,
    select_mirror,
)
from radioctrl.api.transport import (
    DEFAULT_TIMEOUT,
    HTTPTransport,
    build_request,
    create_transport,
    invoke,
)
from radioctrl.models.click import ClickResult
from radioctrl.models.station import Station

logger = logging.getLogger(__name__)


class RadioBrowser:
    """Synchronous client for the radio-browser JSON API.

    Construction either returns a ready client or raises; there is no
    partially initialized state and the mirror is never re-resolved.

    Example:
        with create_radio_browser() as browser:
            stations = browser.get_stations(StationQuery.BY_TAG, "jazz")
            result = browser.click_station(stations[0])
    """

    def __init__(
        self,
        resolver: NameResolver,
        transport: HTTPTransport,
        hostname: str = API_HOSTNAME,
        *,
        owns_transport: bool = False,
    ) -> None:
        """Resolve the directory and fix the base URL.

        Args:
            resolver: Name resolution capability.
            transport: HTTP transport capability.
            hostname: Directory hostname to resolve.
            owns_transport: Whether close() should close the transport.

        Raises:
            ResolutionError: If the hostname cannot be resolved.
            URLConstructionError: If the chosen address forms no valid URL.
        """
        addresses = resolve_mirrors(resolver, hostname)
        mirror = select_mirror(addresses)
        base_url = build_base_url(mirror)

        self._transport = transport
        self._mirror = mirror
        self._base_url = base_url
        self._owns_transport = owns_transport
        logger.debug("Using mirror %s (%s)", mirror, base_url)

    @property
    def mirror(self) -> str:
        """Return the mirror address this client talks to."""
        return self._mirror

    @property
    def base_url(self) -> httpx.URL:
        """Return the fixed API base URL."""
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def get_stations(
        self,
        query: StationQuery,
        search_term: str = "",
        order: str = "votes",
        reverse: bool = True,
        offset: int = 0,
        limit: int = 100,
        hide_broken: bool = True,
    ) -> list[Station]:
        """Search stations (GET /json/stations[/<kind>/<term>]).

        Args:
            query: Search mode.
            search_term: Term for by-X queries (ignored for ALL).
            order: Sort field.
            reverse: Reverse the sort order.
            offset: Results to skip.
            limit: Maximum results.
            hide_broken: Exclude stations failing the server check.

        Returns:
            Matching stations, possibly empty.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the response cannot be decoded.
        """
        request = SearchRequest(
            query=query,
            search_term=search_term,
            order=order,
            reverse=reverse,
            offset=offset,
            limit=limit,
            hide_broken=hide_broken,
        )
        return self.search(request)

    def search(self, request: SearchRequest) -> list[Station]:
        """Run a prebuilt search request; see get_stations()."""
        path, params = encode_query(request)
        http_request = build_request("GET", self._url(path), params=params)
        response = invoke(self._transport, http_request)
        return decode_stations(response)

    def click_station(self, station: Station) -> ClickResult:
        """Register a click for a station (POST /json/url/<uuid>).

        Raises:
            TransportError: If the request fails.
            DecodeError: If the response cannot be decoded.
        """
        http_request = build_request("POST", self._url(f"/url/{station.station_uuid}"))
        response = invoke(self._transport, http_request)
        return decode_click_result(response)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> RadioBrowser:
        """Enter context."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context (close owned transport)."""
        self.close()


def create_radio_browser(
    timeout: float = DEFAULT_TIMEOUT,
    hostname: str = API_HOSTNAME,
) -> RadioBrowser:
    """Create a client wired to the system resolver and an httpx.Client.

    The returned client owns its transport; close it when done.

    Raises:
        ResolutionError: If the hostname cannot be resolved.
        URLConstructionError: If the chosen address forms no valid URL.
    """
    transport = create_transport(timeout)
    try:
        return RadioBrowser(SocketResolver(), transport, hostname, owns_transport=True)
    except Exception:
        transport.close()
        raise
