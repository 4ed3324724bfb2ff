"""Lock-guarded holder for the authenticated session."""

import threading
from typing import Optional

import requests

from ..config import TranslatorConfig
from .login import login
from .models import Credentials, Session


class SessionStore:
    """Holds the session shared by concurrent translation streams.

    The session is fixed for the lifetime of the store. Readers take a
    snapshot under the lock and release it before doing any I/O.
    """

    def __init__(self, session: Session):
        self._session = session
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        credentials: Credentials,
        fingerprint: str,
        client_uuid: str,
        config: Optional[TranslatorConfig] = None,
        http: Optional[requests.Session] = None
    ) -> "SessionStore":
        """Log in and build a store around the resulting session.

        Args:
            credentials: Account credentials.
            fingerprint: Client device identifier.
            client_uuid: Client instance identifier.
            config: Client configuration.
            http: HTTP session used for the login call.

        Raises:
            AuthError: If login failed.
        """
        cookie = login(credentials, config, http)
        return cls(Session(
            username=credentials.username,
            password=credentials.password,
            fingerprint=fingerprint,
            client_uuid=client_uuid,
            cookie=cookie
        ))

    @classmethod
    def from_session(cls, session: Session) -> "SessionStore":
        """Wrap a session that was obtained elsewhere."""
        return cls(session)

    def snapshot(self) -> Session:
        """Return the current session value."""
        with self._lock:
            return self._session
