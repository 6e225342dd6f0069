"""
Aircraft observation model.

An observation is the last known position of one tracked object,
keyed by its name (callsign, registration or whatever the feed uses).
The monotonic timestamp of the observation is kept by the state store,
not here, so it never leaks into the wire format.
"""

import math
from dataclasses import dataclass
from typing import Any

from skyboard.models.errors import PayloadError

POSITION_FIELDS = ('latitude', 'longitude', 'altitude')


def _require_number(data: dict, field: str) -> float:
    """Pull a finite JSON number out of data as a float."""
    if field not in data:
        raise PayloadError(f'{field} is required', field=field)

    value = data[field]
    # bool is a subclass of int, but true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f'{field} must be a number', field=field)

    try:
        value = float(value)
    except OverflowError:
        raise PayloadError(f'{field} must be finite', field=field)
    if not math.isfinite(value):
        raise PayloadError(f'{field} must be finite', field=field)
    return value


@dataclass(frozen=True)
class AircraftObservation:
    """
    Position report for a single aircraft.

    Fields:
        name: Unique key; matched by exact string equality
        latitude: Degrees, as reported by the feed
        longitude: Degrees, as reported by the feed
        altitude: Feed units, passed through unchanged
    """
    name: str
    latitude: float
    longitude: float
    altitude: float

    @classmethod
    def from_dict(cls, data: Any) -> 'AircraftObservation':
        """Build from a decoded JSON body, raising PayloadError if malformed."""
        if not isinstance(data, dict):
            raise PayloadError('Aircraft observation must be a JSON object')
        if 'name' not in data:
            raise PayloadError('name is required', field='name')
        if not isinstance(data['name'], str):
            raise PayloadError('name must be a string', field='name')

        latitude, longitude, altitude = (
            _require_number(data, field) for field in POSITION_FIELDS
        )

        return cls(
            name=data['name'],
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude': self.altitude,
        }
