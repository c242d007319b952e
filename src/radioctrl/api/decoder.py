"""Decoding of radio-browser JSON responses into typed models."""

from __future__ import annotations

import json
from typing import Any, cast

import httpx

from radioctrl.api.errors import DecodeError
from radioctrl.models.click import ClickResult
from radioctrl.models.station import Station


def _load_json(response: httpx.Response) -> Any:
    """Parse the response body as JSON."""
    try:
        return json.loads(response.content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(_describe(response, f"invalid JSON: {e}")) from e


def _describe(response: httpx.Response, reason: str) -> str:
    """Build a decode error message, mentioning non-2xx statuses."""
    if response.is_success:
        return reason
    return f"HTTP {response.status_code}: {reason}"


def decode_stations(response: httpx.Response) -> list[Station]:
    """Decode a JSON array of station objects.

    An empty array is a valid result.

    Raises:
        DecodeError: If the body is not a JSON array of valid stations.
    """
    data = _load_json(response)
    if not isinstance(data, list):
        raise DecodeError(
            _describe(response, f"expected a JSON array of stations, got {type(data).__name__}")
        )

    stations: list[Station] = []
    for index, item in enumerate(cast(list[Any], data)):
        if not isinstance(item, dict):
            raise DecodeError(
                _describe(response, f"station {index} is not an object: {type(item).__name__}")
            )
        try:
            stations.append(Station.from_dict(cast(dict[str, Any], item)))
        except (TypeError, ValueError) as e:
            raise DecodeError(_describe(response, f"station {index}: {e}")) from e
    return stations


def decode_click_result(response: httpx.Response) -> ClickResult:
    """Decode a click registration response object.

    Raises:
        DecodeError: If the body is not a valid click result object.
    """
    data = _load_json(response)
    if not isinstance(data, dict):
        raise DecodeError(
            _describe(response, f"expected a JSON object, got {type(data).__name__}")
        )
    try:
        return ClickResult.from_dict(cast(dict[str, Any], data))
    except (TypeError, ValueError) as e:
        raise DecodeError(_describe(response, f"click result: {e}")) from e
