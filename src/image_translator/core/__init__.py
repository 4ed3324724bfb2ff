"""Public translator handle."""

from .service import TranslationService, translate

__all__ = ["TranslationService", "translate"]
