"""Exceptions raised by the translation catalog engine.

Missing translations are never raised: lookups fall back to the source
text. Only configuration and lifecycle problems surface as exceptions.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all catalog engine errors.

    Example:
        try:
            translator.initialize("locales", "en")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    def __init__(self, message: str, language: Optional[str] = None):
        super().__init__(message)
        self.language = language


class CatalogLoadError(I18nError):
    """Raised when a language source cannot be read or yields no usable entries.

    Example:
        >>> translator.load("xx")
        Traceback (most recent call last):
        ...
        CatalogLoadError: Could not read catalog for language 'xx'
    """


class UnknownLanguageError(I18nError):
    """Raised when switching to or querying a language that was never loaded."""


class NotInitializedError(I18nError):
    """Raised when a lookup runs before initialize() or after clear()."""
