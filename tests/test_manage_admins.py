from __future__ import annotations

import getpass

import pytest
from werkzeug.security import check_password_hash

import manage_admins
from adminportal import create_app
from adminportal.config import ADMIN_COLLECTION
from adminportal.documents import MemoryDocumentStore


@pytest.fixture
def answers(monkeypatch):
    """Feed canned replies to input() and getpass()."""
    def feed(inputs=(), passwords=()):
        replies = iter(inputs)
        secrets = iter(passwords)
        monkeypatch.setattr('builtins.input', lambda prompt='': next(replies))
        monkeypatch.setattr(getpass, 'getpass', lambda prompt='': next(secrets))
    return feed


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def hashed_ctx():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'CREDENTIAL_VERIFIER': 'hashed',
    })
    with app.app_context():
        yield


def _docs(store):
    return store.collections[ADMIN_COLLECTION]


def test_create_admin(ctx, documents, answers):
    answers(['new@example.com', 'New Admin', ''], ['abc123', 'abc123'])

    assert manage_admins.create_admin(documents) == 0

    created = _docs(documents)[-1]
    assert created['email'] == 'new@example.com'
    assert created['name'] == 'New Admin'
    assert created['role'] == 'admin'
    assert created['password'] == 'abc123'


def test_create_admin_rejects_existing_email(ctx, documents, answers):
    answers(['BOSS@example.com'])

    assert manage_admins.create_admin(documents) == 1
    assert len(_docs(documents)) == 2


def test_create_admin_requires_email(ctx, documents, answers):
    answers([''])
    assert manage_admins.create_admin(documents) == 1


@pytest.mark.parametrize("passwords", [
    ['abc123', 'abc124'],
    ['abc12', 'abc12'],
])
def test_create_admin_rejects_bad_password(ctx, documents, answers, passwords, capsys):
    answers(['new@example.com', '', ''], passwords)

    assert manage_admins.create_admin(documents) == 1
    assert len(_docs(documents)) == 2
    assert '❌' in capsys.readouterr().out


def test_list_admins(ctx, documents, capsys):
    assert manage_admins.list_admins(documents) == 0

    out = capsys.readouterr().out
    assert 'Boss@Example.com' in out
    assert 'ops@example.com' in out
    assert 'secret1' not in out


def test_list_admins_empty(ctx, capsys):
    assert manage_admins.list_admins(MemoryDocumentStore()) == 0
    assert 'No admin users yet' in capsys.readouterr().out


def test_reset_password(ctx, documents, answers):
    answers(passwords=['newpass1', 'newpass1'])

    assert manage_admins.reset_password(documents, 'ops@EXAMPLE.com') == 0
    assert documents.updates == [(ADMIN_COLLECTION, 'a2', {'password': 'newpass1'})]


def test_reset_password_unknown_admin(ctx, documents, answers):
    answers(passwords=['newpass1', 'newpass1'])

    assert manage_admins.reset_password(documents, 'ghost@example.com') == 1
    assert documents.updates == []


def test_reset_password_rejects_mismatch(ctx, documents, answers):
    answers(passwords=['newpass1', 'newpass2'])

    assert manage_admins.reset_password(documents, 'ops@example.com') == 1
    assert documents.updates == []


def test_hashed_verifier_stores_hashes(hashed_ctx, documents, answers):
    answers(['hash@example.com', 'Hash', 'owner'], ['abc123', 'abc123'])
    assert manage_admins.create_admin(documents) == 0

    stored = _docs(documents)[-1]['password']
    assert stored != 'abc123'
    assert check_password_hash(stored, 'abc123')

    answers(passwords=['newpass1', 'newpass1'])
    assert manage_admins.reset_password(documents, 'ops@example.com') == 0

    _, _, fields = documents.updates[-1]
    assert fields['password'] != 'newpass1'
    assert check_password_hash(fields['password'], 'newpass1')


def test_main_list_against_sql_store(monkeypatch, capsys):
    monkeypatch.setenv('SECRET_KEY', 'test')
    monkeypatch.setenv('DATABASE_URL', 'sqlite://')
    monkeypatch.delenv('CREDENTIAL_VERIFIER', raising=False)

    assert manage_admins.main(['list']) == 0
    assert 'No admin users yet' in capsys.readouterr().out
