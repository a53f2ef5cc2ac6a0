"""
Auth Package

Session-based identity and the admin gate.
"""

from pixelperfect.auth.decorators import admin_required, is_admin, require_admin
from pixelperfect.auth.sessions import SessionManager
from pixelperfect.auth.routes import create_auth_blueprint

__all__ = ['admin_required', 'is_admin', 'require_admin', 'SessionManager', 'create_auth_blueprint']
