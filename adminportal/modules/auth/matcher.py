"""
Credential matcher for the login surface.

One instance lives for one mount of the login page (one request). It loads
the administrator list once, matches submitted credentials against it, writes
the session pair on success and owns the change-password side flow.
"""

from __future__ import annotations

import logging
from enum import Enum

from adminportal.config import (
    ADMIN_COLLECTION,
    DASHBOARD_ROUTE,
    LOGIN_REDIRECT_DELAY_MS,
    MIN_PASSWORD_LENGTH,
    SESSION_LIFETIME_MS,
)
from adminportal.credentials import AdministratorRecord, PlainTextVerifier
from adminportal.errors import AuthenticationError, StoreError, ValidationError
from adminportal.storage import SessionRecord, generate_token, now_ms

log = logging.getLogger(__name__)


class AdminsState(Enum):
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


class LoginView(Enum):
    LOGIN_FORM = 'login'
    CHANGE_PASSWORD_FORM = 'change_password'


def _ignore(message, category):
    pass


class CredentialMatcher:

    def __init__(self, sessions, documents, navigator, verifier=None,
                 notify=None, clock=now_ms, logger=None):
        self.sessions = sessions
        self.documents = documents
        self.navigator = navigator
        self.verifier = verifier or PlainTextVerifier()
        self.notify = notify or _ignore
        self.clock = clock
        self.logger = logger or log

        self.admins: list[AdministratorRecord] = []
        self.admins_state = AdminsState.LOADING
        self.view = LoginView.LOGIN_FORM
        self.error = ''
        self.selected_admin: AdministratorRecord | None = None

    # --- MOUNT ---

    def mount(self) -> bool:
        """Run the mount effects. Returns True when a live session sent us to the dashboard."""
        if self.redirect_if_logged_in():
            return True
        self.load_admins()
        return False

    def redirect_if_logged_in(self) -> bool:
        stored = self.sessions.load()
        if stored is None:
            if self.sessions.has_any():
                # Half a pair or garbage: same as expired
                self.sessions.clear()
            return False

        record, expiry = stored
        if self.clock() < expiry:
            self.logger.info("Valid session found for %s, redirecting to dashboard", record.email)
            self.navigator.go_to(DASHBOARD_ROUTE)
            return True

        self.logger.info("Session expired for %s, clearing storage", record.email)
        self.sessions.clear()
        return False

    def load_admins(self):
        try:
            docs = self.documents.list_all(ADMIN_COLLECTION)
        except StoreError as e:
            self.logger.error("Error fetching admin users: %s", e.message)
            self.admins = []
            self.admins_state = AdminsState.FAILED
            self.error = 'Failed to load admin configuration'
            self.notify('Failed to load admin users', 'error')
            return

        self.admins = [AdministratorRecord.from_document(doc) for doc in docs]
        self.admins_state = AdminsState.READY
        self.logger.debug("Loaded %d admin users", len(self.admins))
        self.notify('Admin users loaded successfully', 'success')

    # --- LOGIN ---

    def find_admin(self, email, password):
        for admin in self.admins:
            if admin.email_matches(email) and self.verifier.verify(admin, password):
                return admin
        return None

    def authenticate(self, email, password) -> SessionRecord:
        self.error = ''
        if not email or not password:
            self.error = 'Please enter both email and password'
            raise ValidationError(self.error)

        admin = self.find_admin(email, password)
        if admin is None:
            self.logger.warning("Failed login attempt for %s", email)
            self.error = 'Invalid email or password'
            raise AuthenticationError(self.error)

        login_time = self.clock()
        expiry = login_time + SESSION_LIFETIME_MS
        record = SessionRecord(
            email=admin.email,
            name=admin.name,
            role=admin.role,
            login_time=login_time,
            token=generate_token(login_time),
        )
        self.sessions.save(record, expiry)

        self.logger.info("Login successful for: %s", admin.email)
        self.notify(f"Welcome back, {admin.name}!", 'success')
        self.navigator.go_to(DASHBOARD_ROUTE, delay_ms=LOGIN_REDIRECT_DELAY_MS)
        return record

    # --- CHANGE PASSWORD ---

    def get_admin(self, admin_id):
        return next((a for a in self.admins if a.id == admin_id), None)

    def open_change_password(self, admin_id):
        admin = self.get_admin(admin_id)
        if admin is None:
            raise ValidationError('No admin selected for password change', category='error')
        self.selected_admin = admin
        self.view = LoginView.CHANGE_PASSWORD_FORM
        return admin

    def cancel_change_password(self):
        self.selected_admin = None
        self.view = LoginView.LOGIN_FORM
        self.notify('Password change cancelled', 'info')

    def change_password(self, selected_admin, current_password, new_password,
                        confirm_password) -> AdministratorRecord:
        if selected_admin is None:
            raise ValidationError('No admin selected for password change', category='error')
        if not current_password or not new_password or not confirm_password:
            raise ValidationError('Please fill all password fields')
        if not self.verifier.verify(selected_admin, current_password):
            raise ValidationError('Current password is incorrect', category='error')
        if new_password != confirm_password:
            raise ValidationError('New passwords do not match', category='error')
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'Password should be at least {MIN_PASSWORD_LENGTH} characters long')

        stored_password = self.verifier.prepare(new_password)
        try:
            self.documents.update_by_id(
                ADMIN_COLLECTION, selected_admin.id, {'password': stored_password})
        except StoreError as e:
            self.logger.error("Error changing password for %s: %s", selected_admin.email, e.message)
            raise StoreError('Failed to change password. Please try again.') from e

        updated = selected_admin.with_password(stored_password)
        self.admins = [updated if a.id == updated.id else a for a in self.admins]
        self.selected_admin = None
        self.view = LoginView.LOGIN_FORM

        self.logger.info("Password changed for %s", updated.email)
        self.notify('Password changed successfully!', 'success')
        return updated
