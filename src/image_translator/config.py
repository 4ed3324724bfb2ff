"""Configuration for the image translation client."""

from dataclasses import dataclass


DEFAULT_BASE_URL = "https://ichigoreader.com"

# Total attempts per request, including the first one
DEFAULT_MAX_ATTEMPTS = 5


@dataclass
class TranslatorConfig:
    """Configuration for the image translation client.

    Attributes:
        base_url: Root URL of the translation service.
        login_path: Path of the authentication endpoint.
        translate_path: Path of the image translation endpoint.
        max_attempts: Number of attempts per request before giving up.
        timeout: Per-attempt HTTP timeout in seconds.
        user_agent: Optional User-Agent header sent with every request.
    """
    base_url: str = DEFAULT_BASE_URL
    login_path: str = "/auth/login"
    translate_path: str = "/translate"
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    timeout: float = 120
    user_agent: str = ""

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = self.base_url.rstrip('/')

    @property
    def login_url(self) -> str:
        """Full URL of the login endpoint."""
        return f"{self.base_url}{self.login_path}"

    @property
    def translate_url(self) -> str:
        """Full URL of the translate endpoint."""
        return f"{self.base_url}{self.translate_path}"
