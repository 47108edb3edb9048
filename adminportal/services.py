"""Per-request wiring of the collaborators the login and dashboard components need."""

from flask import current_app, flash, g

from adminportal.credentials import get_verifier
from adminportal.documents import SqlDocumentStore
from adminportal.navigation import FlaskNavigator
from adminportal.storage import CookieStorage, SessionStore, now_ms


def session_store():
    return SessionStore(CookieStorage())


def document_store():
    # Tests drop a MemoryDocumentStore in here
    return current_app.config.get('DOCUMENT_STORE') or SqlDocumentStore()


def credential_verifier():
    return get_verifier(current_app.config.get('CREDENTIAL_VERIFIER'))


def clock():
    return current_app.config.get('CLOCK') or now_ms


def navigator():
    if 'navigator' not in g:
        g.navigator = FlaskNavigator()
    return g.navigator


def notify(message, category):
    flash(message, category)
