"""
Skyboard Package.

Minimal in-memory state server for a live aircraft map, built with Flask.

Modules:
    api/         REST endpoints for settings and aircraft positions
    models/      Immutable records and their JSON validation
    store.py     Lock-guarded shared state with a sliding visibility window
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
