"""Helpers shared by the API blueprints."""

from typing import Any

from flask import current_app, request

from skyboard.models import PayloadError
from skyboard.store import StateStore

STORE_KEY = 'STATE_STORE'


def get_store() -> StateStore:
    """The state store injected by create_app()."""
    return current_app.config[STORE_KEY]


def read_json_body() -> Any:
    """
    Decode the request body as JSON.

    The Content-Type header is not enforced; feeds often post bare
    bodies. Raises PayloadError if the body is empty or not JSON.
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise PayloadError('JSON body required')
    return data
