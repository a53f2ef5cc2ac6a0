"""
Flask Extensions

Identity is resolved from a server-side session record on every request;
Flask-Login only carries the resolved principal as ``current_user``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Exposes the principal resolved by the request loader
login_manager = LoginManager()
login_manager.session_protection = None
