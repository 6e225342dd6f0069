"""
API module for Skyboard.

Provides REST endpoints for:
- Display settings
- Live aircraft positions
"""

from skyboard.api.settings import settings_bp
from skyboard.api.aircraft import aircraft_bp

__all__ = ['settings_bp', 'aircraft_bp']
