"""Data models for authentication and session state."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """Account credentials for the translation service.

    Attributes:
        username: Account e-mail address.
        password: Account password.
    """
    username: str
    password: str

    def to_login_request(self) -> dict[str, str]:
        """Build the JSON body for the login endpoint."""
        return {"email": self.username, "password": self.password}

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class TokenPair:
    """Access and refresh tokens returned by a successful login."""
    access_token: str
    refresh_token: str

    @classmethod
    def from_json(cls, data: Any) -> "TokenPair":
        """Parse the ``tokens`` object of a login response.

        Raises:
            ValueError: If either token is missing or not a string.
        """
        if not isinstance(data, dict):
            raise ValueError("'tokens' is not an object")

        access = data.get("accessToken")
        refresh = data.get("refreshToken")
        if not isinstance(access, str) or not isinstance(refresh, str):
            raise ValueError("'tokens' must contain accessToken and refreshToken strings")

        return cls(access_token=access, refresh_token=refresh)

    def to_cookie(self) -> str:
        """Combine both tokens into a Cookie header value."""
        return f"access_cookie={self.access_token}; refresh_token_cookie={self.refresh_token}"


@dataclass(frozen=True)
class Session:
    """Authenticated session state.

    Attributes:
        username: Identity used to log in.
        password: Secret used to log in.
        fingerprint: Client device identifier sent with every translation.
        client_uuid: Client instance identifier sent with every translation.
        cookie: Session cookie obtained at login.
    """
    username: str
    password: str
    fingerprint: str
    client_uuid: str
    cookie: str

    def __repr__(self) -> str:
        return (
            f"Session(username={self.username!r}, fingerprint={self.fingerprint!r}, "
            f"client_uuid={self.client_uuid!r})"
        )
