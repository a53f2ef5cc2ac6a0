"""
Entity Store

Generic CRUD over the SQLAlchemy session. One ``Storage`` is built by the
application factory and handed to every blueprint that needs it.
"""

import logging

from sqlalchemy.exc import IntegrityError

from pixelperfect.errors import ConflictError, NotFoundError
from pixelperfect.models import (
    BlogArticle,
    JobApplication,
    JobOpening,
    Product,
    Project,
    Service,
    User,
)
from pixelperfect.models.base import MAX_ID

logger = logging.getLogger(__name__)

# Never written through create/update
IMMUTABLE_FIELDS = ('id', 'created_at')


class Repository:
    """Typed CRUD for a single model."""

    def __init__(self, session, model):
        self.session = session
        self.model = model

    def list(self, **filters):
        """All rows matching the exact-equality ``filters``, oldest first."""
        query = self.session.query(self.model).filter_by(**filters)
        return query.order_by(self.model.id).all()

    def get(self, record_id):
        """The row with ``record_id``, or None. Out-of-range ids never match."""
        if not is_valid_id(record_id):
            return None
        return self.session.get(self.model, record_id)

    def count(self):
        return self.session.query(self.model).count()

    def create(self, **fields):
        record = self.model(**_writable(fields))
        self.session.add(record)
        self._commit()
        return record

    def update(self, record_id, **fields):
        """Merge ``fields`` onto an existing row; omitted fields are untouched."""
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(f'{self.model.__name__} {record_id} not found')
        for name, value in _writable(fields).items():
            setattr(record, name, value)
        self._commit()
        return record

    def delete(self, record_id):
        """Hard delete. Returns False when there was nothing to delete."""
        record = self.get(record_id)
        if record is None:
            return False
        self.session.delete(record)
        self._commit()
        return True

    def _commit(self):
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


class UserRepository(Repository):

    def __init__(self, session):
        super().__init__(session, User)

    def get_by_username(self, username):
        return self.session.query(User).filter_by(username=username).first()

    def create(self, username, password_hash):
        """Self-registration path; the account is never an admin."""
        return self._add(username, password_hash, is_admin=False)

    def create_admin(self, username, password_hash):
        """Bootstrap an administrator in a single insert."""
        return self._add(username, password_hash, is_admin=True)

    def _add(self, username, password_hash, is_admin):
        if self.get_by_username(username) is not None:
            raise ConflictError()
        user = User(username=username, password_hash=password_hash, is_admin=is_admin)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError() from None
        return user

    def set_admin(self, username, is_admin=True):
        user = self.get_by_username(username)
        if user is None:
            raise NotFoundError(f'User {username} not found')
        user.is_admin = is_admin
        self._commit()
        return user


class Storage:
    """Repositories for every entity kind, sharing one session."""

    def __init__(self, session):
        self.session = session
        self.users = UserRepository(session)
        self.projects = Repository(session, Project)
        self.services = Repository(session, Service)
        self.products = Repository(session, Product)
        self.jobs = Repository(session, JobOpening)
        self.applications = Repository(session, JobApplication)
        self.articles = Repository(session, BlogArticle)


def is_valid_id(value):
    return isinstance(value, int) and 1 <= value <= MAX_ID


def _writable(fields):
    return {name: value for name, value in fields.items() if name not in IMMUTABLE_FIELDS}
