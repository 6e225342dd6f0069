"""
Shared in-memory state for settings and live aircraft positions.

Provides the single source of truth behind the HTTP API:
- Singleton display settings, replaced wholesale on write
- Aircraft observations upserted by name
- Reads filtered to a sliding visibility window

Design notes:
Every operation takes one lock for its full duration and never calls
out (no logging, no I/O) while holding it. Timestamps come from a
monotonic clock so wall-clock adjustments cannot make aircraft flicker
in or out of view.

Stale entries are hidden from reads but never removed, so memory grows
with the number of distinct names ever seen.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from skyboard.models import AircraftObservation, Settings

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY_WINDOW = 600.0  # seconds


@dataclass
class AircraftEntry:
    """An observation paired with the monotonic time it was received."""
    observation: AircraftObservation
    last_seen: float


class StateStore:
    """
    Thread-safe container for all application state.

    Created once at startup and handed to request handlers; holds no
    external resources so it needs no teardown.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        visibility_window: float = DEFAULT_VISIBILITY_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.visibility_window = visibility_window
        self._clock = clock

        self._settings = settings if settings is not None else Settings()
        self._aircraft: List[AircraftEntry] = []
        self._lock = threading.Lock()

        # Statistics
        self._inserts = 0
        self._updates = 0

    def now(self) -> float:
        """Current reading of the store's clock."""
        return self._clock()

    def get_settings(self) -> Settings:
        with self._lock:
            return self._settings

    def set_settings(self, settings: Settings) -> Settings:
        """Replace settings wholesale and return the stored value."""
        with self._lock:
            self._settings = settings
            stored = self._settings

        logger.debug(f'Settings replaced: {stored}')
        return stored

    def get_visible_aircraft(self, now: Optional[float] = None) -> List[AircraftObservation]:
        """
        Get every observation seen within the visibility window.

        An entry is visible iff now - last_seen < visibility_window, so
        an entry exactly one window old is already hidden. Results keep
        stored order (first-seen order).
        """
        with self._lock:
            if now is None:
                now = self._clock()
            return [
                entry.observation
                for entry in self._aircraft
                if now - entry.last_seen < self.visibility_window
            ]

    def upsert_aircraft(
        self,
        observation: AircraftObservation,
        now: Optional[float] = None,
    ) -> Settings:
        """
        Insert or replace the entry for observation.name.

        An existing entry keeps its position in the collection and gets
        both a new observation and a new timestamp; stale entries are
        revived the same way. A new name is appended.

        Returns the current settings rather than the stored aircraft,
        which is what POST /aircraft answers with.
        """
        with self._lock:
            if now is None:
                now = self._clock()
            for entry in self._aircraft:
                if entry.observation.name == observation.name:
                    entry.observation = observation
                    entry.last_seen = now
                    self._updates += 1
                    inserted = False
                    break
            else:
                self._aircraft.append(AircraftEntry(observation, now))
                self._inserts += 1
                inserted = True
            settings = self._settings

        if inserted:
            logger.info(f'Tracking new aircraft {observation.name!r}')
        else:
            logger.debug(f'Updated aircraft {observation.name!r}')
        return settings

    def get_entry(self, name: str) -> Optional[AircraftEntry]:
        """Get a copy of the stored entry for name, visible or not."""
        with self._lock:
            for entry in self._aircraft:
                if entry.observation.name == name:
                    return AircraftEntry(entry.observation, entry.last_seen)
        return None

    def entry_count(self) -> int:
        """Number of stored entries, including ones outside the window."""
        with self._lock:
            return len(self._aircraft)

    def __len__(self) -> int:
        return self.entry_count()

    @property
    def stats(self) -> dict:
        """Get store statistics."""
        with self._lock:
            now = self._clock()
            visible = sum(
                1 for entry in self._aircraft
                if now - entry.last_seen < self.visibility_window
            )
            return {
                'aircraft_entries': len(self._aircraft),
                'visible_aircraft': visible,
                'inserts': self._inserts,
                'updates': self._updates,
                'visibility_window_seconds': self.visibility_window,
            }
