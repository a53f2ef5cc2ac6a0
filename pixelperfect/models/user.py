"""
User and Session Models
"""

from flask_login import UserMixin
from pixelperfect.extensions import db
from pixelperfect.models.base import SerializerMixin, utcnow


class User(UserMixin, SerializerMixin, db.Model):
    """Account that can sign in; only admins may manage content"""
    __tablename__ = 'users'
    __hidden_fields__ = ('password_hash',)
    
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<User {self.username}>'


class AuthSession(db.Model):
    """Server-side login session keyed by the opaque cookie value.

    ``user_id`` is deliberately not a foreign key: sessions live and expire
    independently of the user rows they point at.
    """
    __tablename__ = 'auth_sessions'
    
    id = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    
    def is_expired(self, now=None):
        return self.expires_at <= (now or utcnow())
    
    def __repr__(self):
        return f'<AuthSession user:{self.user_id} until {self.expires_at}>'
