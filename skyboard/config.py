"""
Configuration management for Skyboard.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _parse_int(value: str, default: int) -> int:
    """Parse an integer, falling back to default if empty/invalid."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _parse_port(value: str, default: int) -> int:
    """Parse a TCP port in 1-65535, or return default."""
    port = _parse_int(value, default)
    return port if 1 <= port <= 65535 else default


def _parse_positive_float(value: str, default: float) -> float:
    """Parse a float greater than zero, or return default."""
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def _parse_bool(value: str, default: bool) -> bool:
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class ServerConfig:
    """HTTP listener settings."""
    host: str = '127.0.0.1'
    port: int = 3030


@dataclass(frozen=True)
class StoreConfig:
    """Shared state store settings."""
    visibility_window_seconds: float = 600.0  # 10 minute sliding window
    default_show_tags: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    server: ServerConfig
    store: StoreConfig

    # Flask settings
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration from the environment."""
    return AppConfig(
        server=ServerConfig(
            host=os.getenv('SKYBOARD_HOST') or ServerConfig.host,
            port=_parse_port(os.getenv('SKYBOARD_PORT'), ServerConfig.port),
        ),
        store=StoreConfig(
            visibility_window_seconds=_parse_positive_float(
                os.getenv('VISIBILITY_WINDOW_SECONDS'),
                StoreConfig.visibility_window_seconds,
            ),
            default_show_tags=_parse_bool(
                os.getenv('DEFAULT_SHOW_TAGS'),
                StoreConfig.default_show_tags,
            ),
        ),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Default instance used by the application factory
config = load_config()
