"""
Stub console Flask application factory.

The stub console renders the same login form, top bar and license
dialog markup as the real web console so the browser scenarios can run
without a console deployment. Accounts and license state are kept in
memory and are rebuilt for every application instance.
"""

import logging

from flask import Flask

from config import get_config
from console_app.models import LicenseInfo, seed_accounts

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the stub console application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating stub console with config: %s", config_class.__name__)

    project = app.config["CONSOLE_PROJECT_NAME"]
    app.extensions["console_accounts"] = seed_accounts(project)
    app.extensions["console_license"] = LicenseInfo(
        show_notice=app.config["CONSOLE_LICENSE_NOTICE"]
    )
    logger.info(
        "Seeded %d accounts for project %s",
        len(app.extensions["console_accounts"]),
        project,
    )

    # Register blueprints
    from console_app.routes.api import api_bp
    from console_app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/kylin/api")
    app.register_blueprint(views_bp)

    return app
