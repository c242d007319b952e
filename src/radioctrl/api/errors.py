"""Error types raised by the radio-browser API client.

Every failure surfaced by the client derives from RadioBrowserError, so
callers can catch the whole family or a single kind.
"""


class RadioBrowserError(Exception):
    """Base class for all radio-browser client errors."""


class ResolutionError(RadioBrowserError):
    """The directory hostname could not be resolved to any mirror."""


class URLConstructionError(RadioBrowserError):
    """A resolved mirror address cannot form a valid URL authority."""


class TransportError(RadioBrowserError):
    """The HTTP transport failed before a response body was read."""


class DecodeError(RadioBrowserError):
    """A response body is not valid JSON or has an unexpected shape."""
