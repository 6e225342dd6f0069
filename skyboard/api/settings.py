"""
Settings API endpoints.

Provides endpoints for:
- GET /settings - Current display settings
- POST /settings - Replace display settings
"""

import logging

from flask import Blueprint, jsonify

from skyboard.api.common import get_store, read_json_body
from skyboard.models import Settings

logger = logging.getLogger(__name__)

settings_bp = Blueprint('settings', __name__, url_prefix='/settings')


@settings_bp.route('', methods=['GET'])
def get_settings():
    """Return the current settings."""
    return jsonify(get_store().get_settings().to_dict())


@settings_bp.route('', methods=['POST'])
def set_settings():
    """
    Replace settings wholesale.

    Body: {"show_tags": bool}

    Responds with the value now stored.
    """
    settings = Settings.from_dict(read_json_body())
    stored = get_store().set_settings(settings)

    logger.info(f'Settings updated: show_tags={stored.show_tags}')
    return jsonify(stored.to_dict())
