"""Exceptions raised by the translation pipeline."""

from pathlib import Path
from typing import Optional


class TranslatorError(Exception):
    """Base class for all client errors."""


class AuthError(TranslatorError):
    """Login failed or the token response could not be parsed."""


class NetworkError(TranslatorError):
    """A request still failed after exhausting every attempt.

    Attributes:
        attempts: Number of attempts that were made.
        status_code: HTTP status of the last attempt, if a response arrived.
    """

    def __init__(self, message: str, attempts: int, status_code: Optional[int] = None):
        super().__init__(message)
        self.attempts = attempts
        self.status_code = status_code


class ImageIOError(TranslatorError):
    """A source image could not be read or a result could not be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
