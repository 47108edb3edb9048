"""
Client-held session storage.

The login state lives in two keys of a key-value storage owned by the
browser: `adminUser` (JSON session record) and `adminTokenExpiry` (decimal
milliseconds since epoch). In the web app the storage is the signed Flask
session cookie, so nothing server-side remembers who is logged in.
"""

from __future__ import annotations

import json
import random
import string
import time
from dataclasses import dataclass

from flask import session as flask_session

from adminportal.config import EXPIRY_KEY, SESSION_KEY

TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_token(login_time: int) -> str:
    # Presence marker only; nothing ever verifies it
    suffix = ''.join(random.choices(TOKEN_ALPHABET, k=9))
    return f"token_{suffix}_{login_time}"


@dataclass(frozen=True)
class SessionRecord:
    email: str
    name: str
    role: str
    login_time: int
    token: str
    logged_in: bool = True

    def to_json(self) -> str:
        return json.dumps({
            'email': self.email,
            'name': self.name,
            'role': self.role,
            'loggedIn': self.logged_in,
            'loginTime': self.login_time,
            'token': self.token,
        })

    @classmethod
    def from_json(cls, raw: str) -> "SessionRecord":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("session record must be a JSON object")
        return cls(
            email=str(data['email']),
            name=str(data.get('name') or ''),
            role=str(data.get('role') or ''),
            login_time=int(data.get('loginTime') or 0),
            token=str(data.get('token') or ''),
            logged_in=bool(data.get('loggedIn', True)),
        )


class CookieStorage:
    """Key-value view over the Flask session cookie."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return flask_session if self._session is None else self._session

    def get(self, key):
        value = self.session.get(key)
        return None if value is None else str(value)

    def set(self, key, value):
        # Survive browser restarts for PERMANENT_SESSION_LIFETIME
        self.session.permanent = True
        self.session[key] = value

    def remove(self, key):
        self.session.pop(key, None)


class MemoryStorage:

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)


class SessionStore:
    """Reads and writes the session record / expiry pair as one unit."""

    def __init__(self, storage):
        self.storage = storage

    def has_any(self) -> bool:
        return (self.storage.get(SESSION_KEY) is not None
                or self.storage.get(EXPIRY_KEY) is not None)

    def load(self):
        """Return `(record, expiry_ms)` or None when either key is missing or unreadable."""
        raw_record = self.storage.get(SESSION_KEY)
        raw_expiry = self.storage.get(EXPIRY_KEY)
        if not raw_record or not raw_expiry:
            return None
        try:
            record = SessionRecord.from_json(raw_record)
            expiry = int(raw_expiry)
        except (ValueError, KeyError, TypeError):
            return None
        return record, expiry

    def save(self, record: SessionRecord, expiry: int):
        self.storage.set(SESSION_KEY, record.to_json())
        self.storage.set(EXPIRY_KEY, str(expiry))

    def clear(self):
        self.storage.remove(SESSION_KEY)
        self.storage.remove(EXPIRY_KEY)
