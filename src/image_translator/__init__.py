"""Client for the Ichigo Reader image translation service."""

from .config import TranslatorConfig
from .core import TranslationService, translate
from .errors import AuthError, ImageIOError, NetworkError, TranslatorError
from .translation import TranslationJob

__version__ = "0.1.0"

__all__ = [
    "TranslatorConfig",
    "TranslationService",
    "translate",
    "AuthError",
    "ImageIOError",
    "NetworkError",
    "TranslatorError",
    "TranslationJob",
]
