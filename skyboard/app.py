"""
Skyboard Flask Application.

Main entry point for the web application. Initializes:
- Shared state store
- API routes
- Error handlers

Usage:
    python -m skyboard.app

Or with gunicorn (single worker; state lives in process memory):
    gunicorn -w 1 --threads 8 'skyboard.app:create_app()'
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from skyboard.config import AppConfig, config
from skyboard.models import PayloadError, Settings
from skyboard.api import settings_bp, aircraft_bp
from skyboard.api.common import STORE_KEY
from skyboard.store import StateStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_store(app_config: AppConfig) -> StateStore:
    """Build the store with the configured initial settings and window."""
    return StateStore(
        settings=Settings(show_tags=app_config.store.default_show_tags),
        visibility_window=app_config.store.visibility_window_seconds,
    )


def create_app(
    app_config: Optional[AppConfig] = None,
    store: Optional[StateStore] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        app_config: Configuration to use. Defaults to the environment.
        store: State store to serve. A fresh one is created from
               app_config when omitted; tests pass their own.

    Returns:
        Configured Flask application instance.
    """
    app_config = app_config or config
    if store is None:
        store = create_store(app_config)

    app = Flask(__name__)
    app.config[STORE_KEY] = store

    # Map UIs are usually served from a different origin
    CORS(app)

    app.register_blueprint(settings_bp)
    app.register_blueprint(aircraft_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    @app.route('/status')
    def status():
        """Store statistics and listener configuration."""
        return jsonify({
            'store': store.stats,
            'server': {
                'host': app_config.server.host,
                'port': app_config.server.port,
            },
        })

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(PayloadError)
    def bad_payload(e):
        logger.warning(f'Rejected payload: {e.message}')
        return e.to_dict(), 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    host = config.server.host
    port = config.server.port

    logger.info(f'Starting Skyboard on http://{host}:{port}')
    logger.info(f'Aircraft visible for {config.store.visibility_window_seconds:g}s after last report')

    app.run(
        host=host,
        port=port,
        debug=config.debug,
        threaded=True,
        use_reloader=False,  # Reloader would start a second process with its own state
    )


if __name__ == '__main__':
    run_development_server()
