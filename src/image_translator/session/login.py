"""Exchange credentials for a session cookie."""

import json
import logging
from typing import Optional

import requests

from ..config import TranslatorConfig
from ..errors import AuthError, NetworkError
from ..download import Downloader, create_http_session
from .models import Credentials, TokenPair

logger = logging.getLogger(__name__)


def parse_login_response(body: bytes) -> TokenPair:
    """Extract the token pair from a login response body.

    Args:
        body: Raw JSON response of the login endpoint.

    Returns:
        The parsed TokenPair.

    Raises:
        AuthError: If the body is not JSON or lacks the tokens.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise AuthError(f"login response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or "tokens" not in data:
        raise AuthError("login response has no 'tokens' field")

    try:
        return TokenPair.from_json(data["tokens"])
    except ValueError as e:
        raise AuthError(f"login response is malformed: {e}") from e


def login(
    credentials: Credentials,
    config: Optional[TranslatorConfig] = None,
    http: Optional[requests.Session] = None
) -> str:
    """Log in and return the session cookie.

    Args:
        credentials: Account credentials.
        config: Client configuration. Uses defaults if not provided.
        http: HTTP session to use. A new one is created if not provided.

    Returns:
        Cookie header value carrying both tokens.

    Raises:
        AuthError: If every attempt failed or the response is malformed.
    """
    config = config or TranslatorConfig()
    http = http or create_http_session(config)

    request = requests.Request(
        "POST",
        config.login_url,
        json=credentials.to_login_request()
    )
    downloader = Downloader(http, config.max_attempts, config.timeout)

    try:
        body = downloader.download(request)
    except NetworkError as e:
        raise AuthError(f"login failed after {e.attempts} attempts: {e}") from e

    tokens = parse_login_response(body)
    logger.info("Logged in as %s", credentials.username)
    return tokens.to_cookie()
