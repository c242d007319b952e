"""Station search query kinds and request encoding."""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from enum import Enum


class StationQuery(Enum):
    """Station search mode; the value is the fixed path segment."""

    ALL = ""
    BY_UUID = "byuuid"
    BY_NAME = "byname"
    BY_NAME_EXACT = "bynameexact"
    BY_CODEC = "bycodec"
    BY_CODEC_EXACT = "bycodecexact"
    BY_COUNTRY = "bycountry"
    BY_COUNTRY_EXACT = "bycountryexact"
    BY_COUNTRY_CODE_EXACT = "bycountrycodeexact"
    BY_STATE = "bystate"
    BY_STATE_EXACT = "bystateexact"
    BY_LANGUAGE = "bylanguage"
    BY_LANGUAGE_EXACT = "bylanguageexact"
    BY_TAG = "bytag"
    BY_TAG_EXACT = "bytagexact"

    @property
    def segment(self) -> str:
        """Return the path segment for this query kind."""
        return self.value

    @property
    def description(self) -> str:
        """Return a human-readable description."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_string(cls, value: str) -> StationQuery:
        """Parse a path segment or member name (case-insensitive).

        Raises:
            ValueError: If the value names no query kind.
        """
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown station query: {value!r}")


_DESCRIPTIONS: dict[StationQuery, str] = {
    StationQuery.ALL: "Returns all radio stations.",
    StationQuery.BY_UUID: "Returns radio stations by UUID.",
    StationQuery.BY_NAME: "Returns radio stations by name.",
    StationQuery.BY_NAME_EXACT: "Returns radio stations by exact name.",
    StationQuery.BY_CODEC: "Returns radio stations by codec.",
    StationQuery.BY_CODEC_EXACT: "Returns radio stations by exact codec.",
    StationQuery.BY_COUNTRY: "Returns radio stations by country.",
    StationQuery.BY_COUNTRY_EXACT: "Returns radio stations by exact country.",
    StationQuery.BY_COUNTRY_CODE_EXACT: "Returns radio stations by exact country code.",
    StationQuery.BY_STATE: "Returns radio stations by state.",
    StationQuery.BY_STATE_EXACT: "Returns radio stations by exact state.",
    StationQuery.BY_LANGUAGE: "Returns radio stations by language.",
    StationQuery.BY_LANGUAGE_EXACT: "Returns radio stations by exact language.",
    StationQuery.BY_TAG: "Returns radio stations by tag.",
    StationQuery.BY_TAG_EXACT: "Returns radio stations by exact tag.",
}


@dataclass(frozen=True)
class SearchRequest:
    """Parameters of a single station search.

    Attributes:
        query: Search mode.
        search_term: Term appended to the path (ignored for ALL).
        order: Server-side sort field (e.g. "name", "votes").
        reverse: Reverse the sort order.
        offset: Number of results to skip.
        limit: Maximum number of results.
        hide_broken: Exclude stations whose last check failed.
    """

    query: StationQuery = StationQuery.ALL
    search_term: str = ""
    order: str = "votes"
    reverse: bool = True
    offset: int = 0
    limit: int = 100
    hide_broken: bool = True

    def __post_init__(self) -> None:
        """Reject negative pagination values."""
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def encode_query(request: SearchRequest) -> tuple[str, dict[str, str]]:
    """Encode a search request into a path and query parameters.

    The path is relative to the API base URL. The search term is escaped
    as a single path segment, so "/" becomes "%2F" and a term of "." or
    ".." becomes "%2E" or "%2E%2E".

    Args:
        request: The search to encode.

    Returns:
        Tuple of (path, params).
    """
    path = "/stations"
    if request.query is not StationQuery.ALL:
        term = urllib.parse.quote(request.search_term, safe="")
        # Bare "." and ".." would be removed as dot-segments by URL normalization
        if term in (".", ".."):
            term = term.replace(".", "%2E")
        path = f"{path}/{request.query.segment}/{term}"

    # The server's parameter name is all lowercase ("hidebroken")
    params = {
        "order": request.order,
        "reverse": _format_bool(request.reverse),
        "offset": str(request.offset),
        "limit": str(request.limit),
        "hidebroken": _format_bool(request.hide_broken),
    }
    return path, params
