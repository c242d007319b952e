"""Click registration result model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from radioctrl.models.station import parse_uuid


@dataclass(frozen=True, slots=True)
class ClickResult:
    """Outcome of registering a play/click for a station.

    Attributes:
        ok: Whether the directory accepted the click.
        message: Server message (e.g. "retrieved station url").
        station_uuid: Station the click was recorded for, if reported.
        name: Station name as reported by the server.
        url: Stream URL the server handed back.
    """

    ok: bool
    message: str = ""
    station_uuid: uuid.UUID | None = None
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClickResult:
        """Create a ClickResult from the API response object.

        Raises:
            ValueError: If the station UUID is malformed.
            TypeError: If a field has the wrong JSON type.
        """
        ok = data.get("ok", False)
        if not isinstance(ok, bool):
            raise TypeError(f"field 'ok' must be a boolean, got {type(ok).__name__}")

        fields: dict[str, str] = {}
        for key in ("message", "name", "url"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
            fields[key] = value or ""

        return cls(
            ok=ok,
            message=fields["message"],
            station_uuid=parse_uuid(data, "stationuuid", required=False),
            name=fields["name"],
            url=fields["url"],
        )
