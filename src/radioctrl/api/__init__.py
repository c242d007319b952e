"""API client for the radio-browser.info station directory."""

from radioctrl.api.client import RadioBrowser, create_radio_browser
from radioctrl.api.errors import (
    DecodeError,
    RadioBrowserError,
    ResolutionError,
    TransportError,
    URLConstructionError,
)
from radioctrl.api.query import SearchRequest, StationQuery
from radioctrl.api.resolver import API_HOSTNAME, NameResolver, SocketResolver
from radioctrl.api.transport import USER_AGENT, HTTPTransport

__all__ = [
    "API_HOSTNAME",
    "USER_AGENT",
    "DecodeError",
    "HTTPTransport",
    "NameResolver",
    "RadioBrowser",
    "RadioBrowserError",
    "ResolutionError",
    "SearchRequest",
    "SocketResolver",
    "StationQuery",
    "TransportError",
    "URLConstructionError",
    "create_radio_browser",
]
