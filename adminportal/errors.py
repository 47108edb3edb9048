"""Exceptions raised by the login surface and the dashboard gate.

Every error carries the message shown to the user and the flash category
the routes render it with.
"""


class PortalError(Exception):
    category = 'error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    """Missing, short or mismatched form fields. Never touches the store."""

    def __init__(self, message, category='warning'):
        super().__init__(message)
        self.category = category


class AuthenticationError(PortalError):
    """No administrator matched. The message never says which field was wrong."""


class StoreError(PortalError):
    """The document store failed to list or update records."""


class SessionExpiredError(PortalError):
    """Stored session is past its expiry. Handled by redirecting, never shown."""
