"""
Session & Identity Provider

Credentials are checked against salted pbkdf2 hashes and every successful
login creates a server-side ``AuthSession`` row. The cookie only carries the
row's random identifier.
"""

import logging
import secrets

from werkzeug.security import check_password_hash, generate_password_hash

from pixelperfect.errors import AuthenticationError
from pixelperfect.models import AuthSession
from pixelperfect.models.base import utcnow

logger = logging.getLogger(__name__)


class SessionManager:
    """Register, log in, log out and resolve principals."""

    def __init__(self, storage, lifetime, cookie_name='pp_sid', cookie_secure=False,
                 password_method='pbkdf2:sha256'):
        self.storage = storage
        self.session = storage.session
        self.lifetime = lifetime
        self.cookie_name = cookie_name
        self.cookie_secure = cookie_secure
        self.password_method = password_method
        # Checked when the username is unknown so both failure paths cost the same
        self._dummy_hash = generate_password_hash(secrets.token_hex(16), method=password_method)

    def register(self, username, password):
        """Create a non-admin user and log it straight in.

        Raises ConflictError when the username is taken.
        """
        user = self.storage.users.create(username, generate_password_hash(password, method=self.password_method))
        logger.info('Registered user %s', user.username)
        return user, self._open(user)

    def login(self, username, password):
        """Return ``(user, session_id)`` or raise AuthenticationError.

        Unknown usernames and wrong passwords raise the same error.
        """
        user = self.storage.users.get_by_username(username)
        if user is None:
            check_password_hash(self._dummy_hash, password)
            logger.debug('Login rejected for %s', username)
            raise AuthenticationError()
        if not check_password_hash(user.password_hash, password):
            logger.debug('Login rejected for %s', username)
            raise AuthenticationError()
        logger.info('User %s logged in', user.username)
        return user, self._open(user)

    def logout(self, session_id):
        """Destroy the session. Unknown or missing ids are not an error."""
        if not session_id:
            return
        record = self.session.get(AuthSession, session_id)
        if record is None:
            return
        user_id = record.user_id
        self.session.delete(record)
        self._commit()
        logger.info('Session closed for user %s', user_id)

    def resolve_principal(self, session_id):
        """Return the user behind ``session_id`` or None.

        Expired sessions and sessions whose user has been deleted are
        removed on sight. A live session has its expiry pushed forward.
        """
        if not session_id:
            return None
        record = self.session.get(AuthSession, session_id)
        if record is None:
            return None

        now = utcnow()
        if record.is_expired(now):
            logger.debug('Session for user %s expired', record.user_id)
            self.session.delete(record)
            self._commit()
            return None

        user = self.storage.users.get(record.user_id)
        if user is None:
            self.session.delete(record)
            self._commit()
            return None

        record.expires_at = now + self.lifetime
        self._commit()
        return user

    def set_cookie(self, response, session_id):
        response.set_cookie(
            self.cookie_name,
            session_id,
            httponly=True,
            secure=self.cookie_secure,
            samesite='Lax',
        )
        return response

    def clear_cookie(self, response):
        response.delete_cookie(self.cookie_name, httponly=True, secure=self.cookie_secure, samesite='Lax')
        return response

    def _open(self, user):
        now = utcnow()
        record = AuthSession(
            id=secrets.token_urlsafe(32),
            user_id=user.id,
            created_at=now,
            expires_at=now + self.lifetime,
        )
        self.session.add(record)
        self._commit()
        return record.id

    def _commit(self):
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
