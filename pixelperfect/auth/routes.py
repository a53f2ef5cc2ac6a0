"""
Auth Routes

Registration, login and logout against server-side sessions.
"""

from flask import Blueprint, jsonify, request
from flask_login import current_user

from pixelperfect.errors import AuthenticationError
from pixelperfect.schemas import Credentials, validate


def create_auth_blueprint(sessions):
    """Build the ``/api`` auth routes around a SessionManager."""
    auth_bp = Blueprint('auth', __name__, url_prefix='/api')

    @auth_bp.route('/register', methods=['POST'])
    def register():
        """Self-registration; any isAdmin in the body is ignored"""
        data = validate(Credentials, request.get_json(silent=True), 'registration')
        user, session_id = sessions.register(data.username, data.password)
        response = jsonify(user.to_dict())
        response.status_code = 201
        return sessions.set_cookie(response, session_id)

    @auth_bp.route('/login', methods=['POST'])
    def login():
        data = validate(Credentials, request.get_json(silent=True), 'login')
        user, session_id = sessions.login(data.username, data.password)
        # Never reuse a session id that existed before authentication
        sessions.logout(request.cookies.get(sessions.cookie_name))
        return sessions.set_cookie(jsonify(user.to_dict()), session_id)

    @auth_bp.route('/logout', methods=['POST'])
    def logout():
        sessions.logout(request.cookies.get(sessions.cookie_name))
        return sessions.clear_cookie(jsonify({'message': 'Logged out'}))

    @auth_bp.route('/user', methods=['GET'])
    def user():
        if not current_user.is_authenticated:
            raise AuthenticationError('Not authenticated')
        return jsonify(current_user.to_dict())

    return auth_bp
