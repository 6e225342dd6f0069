"""
Aircraft API endpoints.

Provides endpoints for:
- GET /aircraft - Aircraft seen within the visibility window
- POST /aircraft - Report a position for one aircraft
"""

from flask import Blueprint, jsonify

from skyboard.api.common import get_store, read_json_body
from skyboard.models import AircraftObservation

aircraft_bp = Blueprint('aircraft', __name__, url_prefix='/aircraft')


@aircraft_bp.route('', methods=['GET'])
def list_aircraft():
    """
    List every aircraft reported within the visibility window.

    Returns a bare JSON array in first-seen order. Aircraft that went
    quiet are left out but remain known to the store.
    """
    observations = get_store().get_visible_aircraft()
    return jsonify([obs.to_dict() for obs in observations])


@aircraft_bp.route('', methods=['POST'])
def report_aircraft():
    """
    Insert or update the position of one aircraft.

    Body: {"name": str, "latitude": float, "longitude": float, "altitude": float}

    Responds with the current settings, not the aircraft, so feeders
    can pick up display changes on every report.
    """
    observation = AircraftObservation.from_dict(read_json_body())
    settings = get_store().upsert_aircraft(observation)
    return jsonify(settings.to_dict())
