"""
PixelPerfect Agency Site - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask, current_app
from pixelperfect.extensions import db, login_manager
from pixelperfect.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    
    from pixelperfect.auth import SessionManager, create_auth_blueprint
    from pixelperfect.api import create_api_blueprint
    from pixelperfect.errors import register_error_handlers
    from pixelperfect.storage import Storage
    
    # One storage and one session manager per application, injected below
    storage = Storage(db.session)
    sessions = SessionManager(
        storage,
        lifetime=app.config['SESSION_LIFETIME'],
        cookie_name=app.config['AUTH_COOKIE_NAME'],
        cookie_secure=app.config['AUTH_COOKIE_SECURE'],
        password_method=app.config['PASSWORD_HASH_METHOD'],
    )
    app.extensions['pixelperfect'] = {'storage': storage, 'sessions': sessions}
    
    # Register blueprints
    app.register_blueprint(create_auth_blueprint(sessions))
    app.register_blueprint(create_api_blueprint(storage))
    register_error_handlers(app)
    
    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()
        if app.config['SEED_DATA']:
            _ensure_default_data(app, storage)
    
    return app


def _ensure_default_data(app, storage):
    """Seed fixtures; safe to run on every start."""
    from pixelperfect.seed import seed_initial_data
    
    added = seed_initial_data(
        storage,
        app.config['ADMIN_USERNAME'],
        app.config['ADMIN_PASSWORD'],
        password_method=app.config['PASSWORD_HASH_METHOD'],
    )
    app.logger.info('Default data verified (%d rows added)', added)


@login_manager.request_loader
def load_principal(req):
    """Resolve the principal from the session cookie on every request."""
    sessions = current_app.extensions['pixelperfect']['sessions']
    return sessions.resolve_principal(req.cookies.get(sessions.cookie_name))
