"""Station model representing a radio-browser directory entry."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, cast


def _text(data: dict[str, Any], key: str) -> str:
    """Return a string field, treating missing/null as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _number(data: dict[str, Any], key: str) -> int:
    """Return an integer field, treating missing/null as 0."""
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _flag(data: dict[str, Any], key: str) -> bool:
    """Return a flag field; the API sends these as 0/1 integers."""
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise TypeError(f"field '{key}' must be a boolean or 0/1, got {value!r}")


def _coordinate(data: dict[str, Any], key: str) -> float | None:
    """Return an optional latitude/longitude."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"field '{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _split_list(raw: str) -> tuple[str, ...]:
    """Split a comma-separated wire list, dropping blanks."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_uuid(data: dict[str, Any], key: str, required: bool = True) -> uuid.UUID | None:
    """Parse a UUID field.

    Args:
        data: Wire object.
        key: Field name.
        required: Whether a missing or empty value is an error.

    Returns:
        Parsed UUID, or None when the field is optional and empty.

    Raises:
        ValueError: If the value is missing (when required) or malformed.
        TypeError: If the value is not a string.
    """
    raw = _text(data, key)
    if not raw:
        if required:
            raise ValueError(f"field '{key}' is required")
        return None
    try:
        return uuid.UUID(raw)
    except ValueError as e:
        raise ValueError(f"field '{key}' is not a valid UUID: {raw!r}") from e


@dataclass(frozen=True, slots=True)
class Station:
    """A radio station as listed by the directory.

    Attributes:
        station_uuid: Unique station identifier.
        name: Station name.
        url: Stream URL as submitted.
        url_resolved: Stream URL after playlist resolution (may be empty).
        homepage: Station homepage.
        favicon: Station icon URL.
        tags: Genre/keyword tags.
        country: Full country name.
        country_code: ISO 3166-1 alpha-2 code.
        state: State or region.
        languages: Broadcast languages.
        codec: Audio codec (e.g. "MP3", "AAC").
        bitrate: Bitrate in kbps (0 if unknown).
        votes: Number of votes.
        click_count: Clicks in the last 24 hours.
        click_trend: Click difference to the previous day.
        hls: Whether the stream is HLS.
        last_check_ok: Whether the last server-side check succeeded.
        ssl_error: Whether the last check hit an SSL error.
        geo_lat: Latitude, if known.
        geo_long: Longitude, if known.
        change_uuid: Identifier of the latest change to this entry.
    """

    station_uuid: uuid.UUID
    name: str = ""
    url: str = ""
    url_resolved: str = ""
    homepage: str = ""
    favicon: str = ""
    tags: tuple[str, ...] = ()
    country: str = ""
    country_code: str = ""
    state: str = ""
    languages: tuple[str, ...] = ()
    codec: str = ""
    bitrate: int = 0
    votes: int = 0
    click_count: int = 0
    click_trend: int = 0
    hls: bool = False
    last_check_ok: bool = True
    ssl_error: bool = False
    geo_lat: float | None = None
    geo_long: float | None = None
    change_uuid: uuid.UUID | None = None

    @property
    def is_broken(self) -> bool:
        """Return True if the directory's last check of the stream failed."""
        return not self.last_check_ok

    @property
    def stream_url(self) -> str:
        """Return the resolved stream URL, falling back to the submitted one."""
        return self.url_resolved or self.url

    @property
    def display_name(self) -> str:
        """Return the name, or the stream URL when the name is blank."""
        return self.name.strip() or self.stream_url

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Station:
        """Create a Station from an API station object.

        Raises:
            ValueError: If the station UUID is missing or malformed.
            TypeError: If a field has the wrong JSON type.
        """
        # Required fields are never None
        station_uuid = cast(uuid.UUID, parse_uuid(data, "stationuuid"))
        return cls(
            station_uuid=station_uuid,
            name=_text(data, "name"),
            url=_text(data, "url"),
            url_resolved=_text(data, "url_resolved"),
            homepage=_text(data, "homepage"),
            favicon=_text(data, "favicon"),
            tags=_split_list(_text(data, "tags")),
            country=_text(data, "country"),
            country_code=_text(data, "countrycode"),
            state=_text(data, "state"),
            languages=_split_list(_text(data, "language")),
            codec=_text(data, "codec"),
            bitrate=_number(data, "bitrate"),
            votes=_number(data, "votes"),
            click_count=_number(data, "clickcount"),
            click_trend=_number(data, "clicktrend"),
            hls=_flag(data, "hls"),
            last_check_ok=_flag(data, "lastcheckok") if "lastcheckok" in data else True,
            ssl_error=_flag(data, "ssl_error"),
            geo_lat=_coordinate(data, "geo_lat"),
            geo_long=_coordinate(data, "geo_long"),
            change_uuid=parse_uuid(data, "changeuuid", required=False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the API's wire representation."""
        return {
            "stationuuid": str(self.station_uuid),
            "changeuuid": str(self.change_uuid) if self.change_uuid else "",
            "name": self.name,
            "url": self.url,
            "url_resolved": self.url_resolved,
            "homepage": self.homepage,
            "favicon": self.favicon,
            "tags": ",".join(self.tags),
            "country": self.country,
            "countrycode": self.country_code,
            "state": self.state,
            "language": ",".join(self.languages),
            "codec": self.codec,
            "bitrate": self.bitrate,
            "votes": self.votes,
            "clickcount": self.click_count,
            "clicktrend": self.click_trend,
            "hls": int(self.hls),
            "lastcheckok": int(self.last_check_ok),
            "ssl_error": int(self.ssl_error),
            "geo_lat": self.geo_lat,
            "geo_long": self.geo_long,
        }
