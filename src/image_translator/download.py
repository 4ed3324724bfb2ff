"""HTTP executor with a fixed retry policy."""

import logging
from typing import Optional

import requests
from tenacity import RetryCallState, Retrying, retry_if_exception_type, stop_after_attempt, wait_none

from .config import DEFAULT_MAX_ATTEMPTS, TranslatorConfig
from .errors import NetworkError

logger = logging.getLogger(__name__)


class _AttemptFailed(Exception):
    """A single attempt failed; carries the HTTP status when one arrived."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def create_http_session(config: Optional[TranslatorConfig] = None) -> requests.Session:
    """Create an HTTP session carrying the configured default headers."""
    http = requests.Session()
    if config is not None and config.user_agent:
        http.headers["User-Agent"] = config.user_agent
    return http


def is_success(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code < 300


class Downloader:
    """Sends a request and buffers the response body, retrying on failure.

    Attempts run one after another with no delay between them. A transport
    error or a non-2xx status counts as a failed attempt. The first
    successful attempt wins; when every attempt fails, the error of the
    last one is raised.
    """

    def __init__(
        self,
        http: requests.Session,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        timeout: Optional[float] = None
    ):
        """Initialize the downloader.

        Args:
            http: Session used to prepare and send requests.
            max_attempts: Total number of attempts per request.
            timeout: Per-attempt timeout in seconds.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.http = http
        self.max_attempts = max_attempts
        self.timeout = timeout

    def _send_once(self, request: requests.Request) -> bytes:
        """Make a single attempt, raising _AttemptFailed on any failure."""
        try:
            prepared = self.http.prepare_request(request)
            # Proxies, CA bundle and .netrc from the environment
            settings = self.http.merge_environment_settings(prepared.url, {}, None, None, None)
            response = self.http.send(prepared, timeout=self.timeout, **settings)
            if not is_success(response.status_code):
                raise _AttemptFailed(
                    f"Statuscode: {response.status_code} {response.reason or ''}".rstrip(),
                    status_code=response.status_code
                )
            return response.content
        except requests.RequestException as e:
            raise _AttemptFailed(str(e) or type(e).__name__) from e

    def _log_failure(self, retry_state: RetryCallState) -> None:
        request = retry_state.args[0]
        logger.warning(
            "%s %s failed (attempt %d/%d): %s",
            request.method, request.url, retry_state.attempt_number,
            self.max_attempts, retry_state.outcome.exception()
        )

    def download(self, request: requests.Request) -> bytes:
        """Send a request and return the response body.

        Args:
            request: Unsent request template. It is prepared again for
                every attempt, so it is never consumed.

        Returns:
            The raw response body of the first successful attempt.

        Raises:
            NetworkError: If every attempt failed.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            retry=retry_if_exception_type(_AttemptFailed),
            wait=wait_none(),
            after=self._log_failure,
            reraise=True
        )
        try:
            return retrying(self._send_once, request)
        except _AttemptFailed as e:
            raise NetworkError(str(e), attempts=self.max_attempts, status_code=e.status_code) from e
