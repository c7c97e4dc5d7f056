"""
Admin Portal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
from flask import Flask
from portal.extensions import session_store
from portal.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    # Pages and the admin template both come from the embedded static/ set;
    # Flask's own /static route is disabled in favour of the pages blueprint.
    app = Flask(__name__, static_folder=None, template_folder='static')
    app.config.from_object(config_class)

    logging.getLogger('portal').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    session_store.init_app(app)

    # Register blueprints
    from portal.pages import pages_bp
    from portal.auth import auth_bp
    from portal.admin import admin_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    return app
