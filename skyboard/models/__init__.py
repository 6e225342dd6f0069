"""
Data models for Skyboard.

Plain immutable records plus their JSON (de)serialization. Nothing here
knows about locking or time; that lives in skyboard.store.
"""

from skyboard.models.errors import PayloadError
from skyboard.models.settings import Settings
from skyboard.models.aircraft import AircraftObservation

__all__ = [
    'PayloadError',
    'Settings',
    'AircraftObservation',
]
