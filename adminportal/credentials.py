"""
Administrator records and the password check used against them.

`PlainTextVerifier` compares stored and submitted passwords with ordinary
equality, matching how the `adminlogin` collection is populated today.
`HashedVerifier` is the drop-in replacement once stored passwords are
migrated to Werkzeug hashes (see `manage_admins.py reset-password`).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from werkzeug.security import check_password_hash, generate_password_hash

from adminportal.config import DEFAULT_VERIFIER, VERIFIERS


@dataclass(frozen=True)
class AdministratorRecord:
    id: str
    email: str
    password: str
    name: str = ''
    role: str = ''

    @classmethod
    def from_document(cls, doc: dict) -> "AdministratorRecord":
        return cls(
            id=str(doc['id']),
            email=doc.get('email') or '',
            password=doc.get('password') or '',
            name=doc.get('name') or '',
            role=doc.get('role') or '',
        )

    def with_password(self, password: str) -> "AdministratorRecord":
        return replace(self, password=password)

    def email_matches(self, email: str) -> bool:
        return self.email.lower() == email.lower()


class PlainTextVerifier:
    name = 'plain'

    def verify(self, record: AdministratorRecord, password: str) -> bool:
        return record.password == password

    def prepare(self, password: str) -> str:
        return password


class HashedVerifier:
    name = 'hashed'

    def verify(self, record: AdministratorRecord, password: str) -> bool:
        if not record.password:
            return False
        return check_password_hash(record.password, password)

    def prepare(self, password: str) -> str:
        return generate_password_hash(password, method='pbkdf2:sha256')


def get_verifier(name: str | None = None):
    name = (name or DEFAULT_VERIFIER).strip().lower()
    if name not in VERIFIERS:
        raise ValueError(
            f"Unknown CREDENTIAL_VERIFIER '{name}'. Use one of: {', '.join(VERIFIERS)}")
    return HashedVerifier() if name == 'hashed' else PlainTextVerifier()
