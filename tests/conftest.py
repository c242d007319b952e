"""Test fixtures for radioctrl tests."""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from radioctrl.api.client import RadioBrowser

Handler = Callable[[httpx.Request], httpx.Response]

_STATION_UUID = "941ef6f1-0699-4821-95b1-2b678e3ff62e"


class StubResolver:
    """NameResolver returning fixed addresses or raising a fixed error."""

    def __init__(self, addresses: list[str] | None = None, error: Exception | None = None) -> None:
        self._addresses = addresses or []
        self._error = error
        self.calls: list[str] = []

    def lookup_ip(self, host: str) -> list[str]:
        self.calls.append(host)
        if self._error is not None:
            raise self._error
        return list(self._addresses)


class RecordingTransport:
    """HTTPTransport backed by httpx.MockTransport that records requests."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self._client = httpx.Client(transport=httpx.MockTransport(self._record))

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def send(self, request: httpx.Request) -> httpx.Response:
        return self._client.send(request)

    def close(self) -> None:
        self._client.close()


def _empty_list(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=[])


def _mock_station(**overrides: Any) -> dict[str, Any]:
    """Return a station object as served by radio-browser."""
    station: dict[str, Any] = {
        "changeuuid": "610cafba-71d8-40fc-bf68-1456ec973b9d",
        "stationuuid": _STATION_UUID,
        "serveruuid": None,
        "name": "Radio Paradise Main Mix",
        "url": "http://stream.radioparadise.com/aac-320",
        "url_resolved": "https://stream.radioparadise.com/aac-320",
        "homepage": "https://radioparadise.com/",
        "favicon": "https://radioparadise.com/favicon.ico",
        "tags": "eclectic,rock,world",
        "country": "The United States Of America",
        "countrycode": "US",
        "iso_3166_2": "US-CA",
        "state": "California",
        "language": "english",
        "languagecodes": "en",
        "votes": 12345,
        "lastchangetime_iso8601": "2024-01-01T00:00:00Z",
        "codec": "AAC",
        "bitrate": 320,
        "hls": 0,
        "lastcheckok": 1,
        "clickcount": 987,
        "clicktrend": -3,
        "ssl_error": 0,
        "geo_lat": 39.76,
        "geo_long": -121.84,
        "has_extended_info": False,
    }
    station.update(overrides)
    return station


@pytest.fixture
def station_uuid() -> str:
    """Return the UUID used by the mock station."""
    return _STATION_UUID


@pytest.fixture
def stub_resolver() -> Callable[..., StubResolver]:
    """Return a factory for stand-in name resolvers."""
    return StubResolver


@pytest.fixture
def recording_transport() -> Iterator[Callable[..., RecordingTransport]]:
    """Return a factory for recording transports, closed on teardown."""
    created: list[RecordingTransport] = []

    def factory(handler: Handler = _empty_list) -> RecordingTransport:
        transport = RecordingTransport(handler)
        created.append(transport)
        return transport

    yield factory

    for transport in created:
        transport.close()


@pytest.fixture
def mock_station() -> Callable[..., dict[str, Any]]:
    """Return a factory for station wire objects."""
    return _mock_station


@pytest.fixture
def mock_click_response() -> dict[str, Any]:
    """Return a successful click registration payload."""
    return {
        "ok": True,
        "message": "retrieved station url",
        "stationuuid": "9617a958-0601-11e8-ae97-52543be04c81",
        "name": "Station name",
        "url": "http://this.is.an.url",
    }


@pytest.fixture
def make_browser(
    stub_resolver: Callable[..., StubResolver],
    recording_transport: Callable[..., RecordingTransport],
) -> Callable[..., tuple[RadioBrowser, RecordingTransport]]:
    """Return a factory building a RadioBrowser on stub dependencies."""

    def factory(
        handler: Handler = _empty_list,
        addresses: list[str] | None = None,
    ) -> tuple[RadioBrowser, RecordingTransport]:
        transport = recording_transport(handler)
        resolver = stub_resolver(addresses or ["127.0.0.1"])
        return RadioBrowser(resolver, transport), transport

    return factory
