from uuid import uuid4

from flask_login import UserMixin

from adminportal.config import ADMIN_COLLECTION
from adminportal.extensions import db


def _new_id():
    return uuid4().hex


class AdminLogin(db.Model):
    """One administrator credential entry (the `adminlogin` collection)."""
    __tablename__ = ADMIN_COLLECTION

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    email = db.Column(db.String(150), unique=True, nullable=False)
    # Plain text unless CREDENTIAL_VERIFIER=hashed
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(150), nullable=False, default='')
    role = db.Column(db.String(50), nullable=False, default='admin')

    def to_document(self):
        return {
            'id': self.id,
            'email': self.email,
            'password': self.password,
            'name': self.name,
            'role': self.role,
        }


class AdminSessionUser(UserMixin):
    """Flask-Login user built from a valid stored session, never from the DB."""

    def __init__(self, record):
        self.record = record

    def get_id(self):
        return self.record.token

    @property
    def email(self):
        return self.record.email

    @property
    def name(self):
        return self.record.name

    @property
    def role(self):
        return self.record.role
