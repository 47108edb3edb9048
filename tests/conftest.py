from __future__ import annotations

import pytest

from adminportal import create_app, db
from adminportal.config import ADMIN_COLLECTION
from adminportal.documents import MemoryDocumentStore
from adminportal.navigation import RecordingNavigator
from adminportal.storage import MemoryStorage, SessionStore

ADMINS = [
    {'id': 'a1', 'email': 'Boss@Example.com', 'password': 'secret1', 'name': 'Boss', 'role': 'owner'},
    {'id': 'a2', 'email': 'ops@example.com', 'password': 'hunter22', 'name': 'Ops', 'role': 'admin'},
]


class FakeClock:

    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def documents():
    return MemoryDocumentStore({ADMIN_COLLECTION: ADMINS})


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def sessions(storage):
    return SessionStore(storage)


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def app(documents, clock):
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'DOCUMENT_STORE': documents,
        'CLOCK': clock,
    })
    with app.app_context():
        db.create_all()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
