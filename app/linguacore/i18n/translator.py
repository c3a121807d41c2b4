"""Translator: the language manager and lookup entry point.

Owns the language registry, the loader and the missing-translation
tracker, and resolves lookups against the active catalog.
"""

import threading
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from linguacore.i18n.exceptions import CatalogLoadError, NotInitializedError
from linguacore.i18n.interpolation import substitute
from linguacore.i18n.loader import POTranslationLoader
from linguacore.i18n.models import Gender, TranslationCatalog, TranslationKey
from linguacore.i18n.registry import LanguageRegistry
from linguacore.i18n.resolvers import resolve, select_plural
from linguacore.i18n.tracker import MissingTranslationTracker
from linguacore.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating phrases with context, gender, plural and variables.

    Each instance is an independent registry: tests and embedders can run
    several side by side. A new instance is uninitialized; lookups raise
    NotInitializedError until initialize() succeeds.

    Attributes:
        loader: POTranslationLoader reading catalog sources.
        registry: LanguageRegistry with loaded catalogs and the active language.
        tracker: MissingTranslationTracker recording fallbacks.
        base_path: Root location of language sources, set by initialize().
    """

    def __init__(
        self,
        loader: Optional[POTranslationLoader] = None,
        tracker: Optional[MissingTranslationTracker] = None,
    ):
        self.loader = loader or POTranslationLoader()
        self.registry = LanguageRegistry()
        self.tracker = tracker or MissingTranslationTracker()
        self.base_path: Optional[Union[str, Path]] = None
        self._lock = threading.RLock()

    # Lifecycle

    def initialize(self, base_path: Union[str, Path], default_language: str) -> None:
        """Reset the registry, load the default language and make it active.

        Args:
            base_path: Root location of language sources.
            default_language: Language code to load and activate.

        Raises:
            CatalogLoadError: If the source cannot be read or holds no
                usable entries.
        """
        with self._lock:
            self.registry.clear()
            self.base_path = None

            catalog = self.loader.load(default_language, base_path)
            if len(catalog) == 0:
                logger.error(
                    "default_catalog_empty",
                    language=default_language,
                    base_path=str(base_path),
                )
                raise CatalogLoadError(
                    f"Catalog for default language '{default_language}' has no usable entries",
                    language=default_language,
                )

            self.registry.install(catalog)
            self.registry.activate(default_language)
            self.base_path = base_path

        logger.info(
            "initialized_translator",
            base_path=str(base_path),
            default_language=default_language,
            entry_count=len(catalog),
        )

    def load(self, language: str, merge: bool = False) -> TranslationCatalog:
        """Load a language from base_path without changing the active language.

        Args:
            language: Language code to load.
            merge: Overlay onto an already loaded catalog instead of replacing it.

        Returns:
            The installed catalog.

        Raises:
            NotInitializedError: If initialize() has not run.
            CatalogLoadError: If the source cannot be read.
        """
        with self._lock:
            if self.base_path is None:
                raise NotInitializedError(
                    "Translations have not been initialized", language=language
                )

            catalog = self.loader.load(language, self.base_path)
            if len(catalog) == 0:
                logger.warning("loaded_empty_catalog", language=language)

            existing = self.registry.find(language)
            if merge and existing is not None:
                merged = TranslationCatalog(
                    language=language,
                    entries=dict(existing.entries),
                    loaded_at=catalog.loaded_at,
                )
                merged.merge(catalog)
                catalog = merged

            self.registry.install(catalog)

        logger.info("loaded_language", language=language, entry_count=len(catalog))
        return catalog

    def set_active_language(self, language: str) -> None:
        """Switch the active language.

        Raises:
            UnknownLanguageError: If the language was never loaded.
        """
        previous = self.registry.activate(language)
        logger.info("active_language_changed", previous=previous, language=language)

    def get_active_language(self) -> Optional[str]:
        return self.registry.active_language

    def get_loaded_languages(self) -> List[str]:
        return self.registry.languages()

    def clear(self) -> None:
        """Drop all catalogs; lookups fail until initialize() runs again."""
        with self._lock:
            self.registry.clear()
            self.base_path = None
        logger.info("cleared_translations")

    # Lookups

    def translate(
        self,
        text: str,
        context: Optional[str] = None,
        gender: Optional[Union[Gender, str]] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a phrase in the active language.

        Falls back to the untouched source text when no entry matches, then
        substitutes ``{name}`` placeholders from variables.

        Args:
            text: Source phrase.
            context: Optional context; "" is the same as None.
            gender: Optional Gender (or its value) selecting a body variant.
            variables: Optional placeholder values.

        Returns:
            Displayable text, never empty for a non-empty source phrase.

        Raises:
            NotInitializedError: If no language is active.
            ValueError: If gender is not a known gender.
        """
        if gender is not None:
            gender = Gender.from_value(gender)

        catalog = self.registry.active_catalog()
        resolution = resolve(catalog, TranslationKey(text, context), gender)
        if not resolution.found:
            logger.debug(
                "translation_missing",
                text=text,
                context=resolution.key.context,
                language=catalog.language,
            )
            self.tracker.record(resolution.key, catalog.language)

        return substitute(resolution.text, variables)

    def translate_plural(
        self,
        count: int,
        singular: str,
        dual: str,
        plural: str,
        counted: bool = False,
        context: Optional[str] = None,
    ) -> str:
        """Resolve the singular, dual or plural phrase chosen by count.

        Args:
            count: Non-negative number of items.
            singular: Phrase used for 1 and 11+.
            dual: Phrase used for 2.
            plural: Phrase used for 0 and 3-10.
            counted: Prefix the result with the count and a space.
            context: Optional context applied to the selected phrase.

        Raises:
            NotInitializedError: If no language is active.
            ValueError: If count is negative.
        """
        phrase = select_plural(count, singular, dual, plural)
        word = self.translate(phrase, context)
        if counted:
            return f"{count} {word}"
        return word

    def has_translation(
        self,
        text: str,
        context: Optional[str] = None,
        language: Optional[str] = None,
    ) -> bool:
        """Check if a phrase resolves without falling back.

        Raises:
            NotInitializedError: If language is omitted and none is active.
            UnknownLanguageError: If language was never loaded.
        """
        return self.registry.get(language).has_entry(TranslationKey(text, context))

    def count(self, language: Optional[str] = None) -> int:
        """Number of entries in the active or named catalog."""
        return len(self.registry.get(language))

    def keys(self, language: Optional[str] = None) -> List[TranslationKey]:
        """Keys of the active or named catalog."""
        return self.registry.get(language).keys()

    def get_catalog(self, language: Optional[str] = None) -> TranslationCatalog:
        return self.registry.get(language)

    # Missing-translation tracking

    def enable_missing_tracking(self, enabled: bool = True) -> None:
        self.tracker.enable(enabled)

    def missing_count(self, language: Optional[str] = None) -> int:
        return self.tracker.count(language)

    def export_missing(self, language: Optional[str] = None) -> str:
        """PO text listing every tracked miss with an empty msgstr."""
        return self.tracker.export(language)

    def export_missing_to(
        self, path: Union[str, Path], language: Optional[str] = None
    ) -> int:
        return self.tracker.export_to(path, language)

    def clear_missing(self) -> None:
        self.tracker.clear()
