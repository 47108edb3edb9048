import logging
from enum import Enum

from adminportal.config import LOGIN_ROUTE
from adminportal.errors import SessionExpiredError
from adminportal.storage import now_ms

log = logging.getLogger(__name__)


class GateState(Enum):
    CHECKING_AUTH = 'checking'
    AUTHENTICATED = 'authenticated'
    REDIRECTING_TO_LOGIN = 'redirecting'


class SessionGate:
    """Dashboard entry check. Runs once per mount; never re-checks mid-visit."""

    def __init__(self, sessions, navigator, clock=now_ms, logger=None):
        self.sessions = sessions
        self.navigator = navigator
        self.clock = clock
        self.logger = logger or log
        self.state = GateState.CHECKING_AUTH
        self.session = None

    @property
    def authenticated(self):
        return self.state is GateState.AUTHENTICATED

    def check_auth(self):
        if self.state is not GateState.CHECKING_AUTH:
            return self.state

        try:
            self.session = self._validate()
        except SessionExpiredError as e:
            self.logger.warning(e.message)
            self._redirect()
        else:
            if self.session is None:
                self._redirect()
            else:
                self.state = GateState.AUTHENTICATED
        return self.state

    def _validate(self):
        stored = self.sessions.load()
        if stored is None:
            if self.sessions.has_any():
                self.sessions.clear()
            return None

        record, expiry = stored
        if self.clock() >= expiry:
            self.sessions.clear()
            raise SessionExpiredError(f"Session expired for {record.email}")
        return record

    def _redirect(self):
        self.state = GateState.REDIRECTING_TO_LOGIN
        self.navigator.go_to(LOGIN_ROUTE)
