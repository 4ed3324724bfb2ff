"""Authentication and session state."""

from .login import login
from .models import Credentials, Session, TokenPair
from .store import SessionStore

__all__ = ["login", "Credentials", "Session", "TokenPair", "SessionStore"]
