"""Data models for radio-browser stations and click results."""

from radioctrl.models.click import ClickResult
from radioctrl.models.station import Station

__all__ = [
    "ClickResult",
    "Station",
]
