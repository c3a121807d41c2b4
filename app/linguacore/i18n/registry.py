"""Language registry holding the loaded catalogs and the active language.

Provides thread-safe installation, switching and retrieval of catalogs.
"""

import threading
from typing import Dict, List, Optional

from linguacore.i18n.exceptions import NotInitializedError, UnknownLanguageError
from linguacore.i18n.models import TranslationCatalog
from linguacore.logging import get_module_logger

logger = get_module_logger()


class LanguageRegistry:
    """Thread-safe registry of catalogs keyed by language code.

    Attributes:
        _catalogs: Dict mapping language code to TranslationCatalog.
        _active: Code of the active language, or None when uninitialized.
        _lock: Lock guarding every read and mutation.
    """

    def __init__(self):
        self._catalogs: Dict[str, TranslationCatalog] = {}
        self._active: Optional[str] = None
        self._lock = threading.RLock()

    def install(self, catalog: TranslationCatalog) -> None:
        """Install a catalog, replacing any catalog for the same language."""
        with self._lock:
            replaced = catalog.language in self._catalogs
            self._catalogs[catalog.language] = catalog
            logger.debug(
                "catalog_installed",
                language=catalog.language,
                replaced=replaced,
                entry_count=len(catalog),
            )

    def activate(self, language: str) -> Optional[str]:
        """Make a loaded language active.

        Returns:
            The previously active language code.

        Raises:
            UnknownLanguageError: If the language was never loaded.
        """
        with self._lock:
            if language not in self._catalogs:
                raise UnknownLanguageError(
                    f"Language '{language}' has not been loaded", language=language
                )
            previous = self._active
            self._active = language
            return previous

    @property
    def active_language(self) -> Optional[str]:
        with self._lock:
            return self._active

    def active_catalog(self) -> TranslationCatalog:
        """Get the active catalog.

        Raises:
            NotInitializedError: If no language is active.
        """
        with self._lock:
            if self._active is None:
                raise NotInitializedError("Translations have not been initialized")
            return self._catalogs[self._active]

    def get(self, language: Optional[str] = None) -> TranslationCatalog:
        """Get the catalog for a language, or the active one when omitted.

        Raises:
            NotInitializedError: If language is omitted and none is active.
            UnknownLanguageError: If the language was never loaded.
        """
        if language is None:
            return self.active_catalog()
        with self._lock:
            if language not in self._catalogs:
                raise UnknownLanguageError(
                    f"Language '{language}' has not been loaded", language=language
                )
            return self._catalogs[language]

    def find(self, language: str) -> Optional[TranslationCatalog]:
        with self._lock:
            return self._catalogs.get(language)

    def languages(self) -> List[str]:
        """Loaded language codes in load order."""
        with self._lock:
            return list(self._catalogs.keys())

    def is_loaded(self, language: str) -> bool:
        with self._lock:
            return language in self._catalogs

    def clear(self) -> None:
        """Drop every catalog and the active pointer."""
        with self._lock:
            self._catalogs.clear()
            self._active = None
            logger.debug("language_registry_cleared")
