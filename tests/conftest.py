import pytest
from werkzeug.security import generate_password_hash

from pixelperfect import create_app
from pixelperfect.config import TestConfig
from pixelperfect.extensions import db
from pixelperfect.models import User

ADMIN = ('admin@example.com', 'admin-pass')
MEMBER = ('member@example.com', 'member-pass')

PROJECT = {
    'title': 'X',
    'description': 'Y',
    'category': 'Web Design',
    'client': 'Z',
    'imageUrl': 'http://x',
    'featured': False,
}


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def storage(app):
    return app.extensions['pixelperfect']['storage']


def _add_user(app, username, password, is_admin=False):
    with app.app_context():
        user = User(
            username=username,
            password_hash=generate_password_hash(password, method=TestConfig.PASSWORD_HASH_METHOD),
            is_admin=is_admin,
        )
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture()
def admin_user(app):
    return _add_user(app, *ADMIN, is_admin=True)


@pytest.fixture()
def member_user(app):
    return _add_user(app, *MEMBER)


def login(client, credentials):
    username, password = credentials
    return client.post('/api/login', json={'username': username, 'password': password})


@pytest.fixture()
def admin_client(client, admin_user):
    r = login(client, ADMIN)
    assert r.status_code == 200
    return client


@pytest.fixture()
def member_client(app, member_user):
    c = app.test_client()
    r = login(c, MEMBER)
    assert r.status_code == 200
    return c
