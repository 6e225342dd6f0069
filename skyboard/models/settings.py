"""
Settings model - the singleton display configuration record.

Controls client-facing display behaviour of the map UI. Only one
field exists today, but unknown keys are tolerated on input so newer
clients can talk to an older server.
"""

from dataclasses import dataclass
from typing import Any

from skyboard.models.errors import PayloadError


@dataclass(frozen=True)
class Settings:
    """
    Display settings shared by every client.

    Fields:
        show_tags: Whether the map draws name tags next to aircraft
    """
    show_tags: bool = True

    @classmethod
    def from_dict(cls, data: Any) -> 'Settings':
        """Build from a decoded JSON body, raising PayloadError if malformed."""
        if not isinstance(data, dict):
            raise PayloadError('Settings must be a JSON object')
        if 'show_tags' not in data:
            raise PayloadError('show_tags is required', field='show_tags')

        show_tags = data['show_tags']
        if not isinstance(show_tags, bool):
            raise PayloadError('show_tags must be a boolean', field='show_tags')

        return cls(show_tags=show_tags)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {'show_tags': self.show_tags}
