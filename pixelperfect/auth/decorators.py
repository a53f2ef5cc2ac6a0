"""
Admin Gate

The principal is resolved from the session cookie for every request, so
the check below always sees the user's current ``is_admin`` value.
"""

from functools import wraps
from flask_login import current_user
from pixelperfect.errors import AuthorizationError


def is_admin(principal):
    """True iff a principal was resolved and it is an administrator."""
    if principal is None or not principal.is_authenticated:
        return False
    return bool(getattr(principal, 'is_admin', False))


def require_admin(principal):
    """Raise AuthorizationError unless ``principal`` is an admin.

    Anonymous and non-admin callers get the same error so the response
    says nothing about whether an account exists.
    """
    if not is_admin(principal):
        raise AuthorizationError()


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        require_admin(current_user)
        return f(*args, **kwargs)
    return wrapper
