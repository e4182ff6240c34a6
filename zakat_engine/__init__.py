"""Flask application factory for the zakat engine."""
import logging

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from zakat_engine.services.config import get_engine_config, get_log_level


logger = logging.getLogger('zakat_engine')


def create_app(config: dict | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Trust X-Forwarded-For from reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False

    # Override with provided config
    if config:
        app.config.update(config)

    logger.setLevel(get_log_level())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)

    # Register CLI commands
    from zakat_engine import cli
    cli.register_cli(app)

    # Register blueprints
    from zakat_engine.routes.health import health_bp
    from zakat_engine.routes.api import api_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    logger.debug(f"Application created with config: {get_engine_config()}")
    return app
