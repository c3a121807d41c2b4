"""Factory functions for creating i18n components.

Provides convenience functions for building translators from the
application settings.
"""

from pathlib import Path
from typing import Optional, Union

from linguacore.configuration import Settings, get_settings
from linguacore.i18n.loader import (
    CatalogSource,
    FileSystemCatalogSource,
    POTranslationLoader,
)
from linguacore.i18n.tracker import MissingTranslationTracker
from linguacore.i18n.translator import Translator
from linguacore.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    base_path: Optional[Union[str, Path]] = None,
    default_language: Optional[str] = None,
    source: Optional[CatalogSource] = None,
    track_missing: Optional[bool] = None,
    initialize: bool = True,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Unset arguments are taken from ``settings.i18n``.

    Args:
        base_path: Root location of language sources (default: I18N_BASE_PATH)
        default_language: Language to load and activate (default: I18N_DEFAULT_LANGUAGE)
        source: Byte source (default: filesystem using I18N_CATALOG_FILENAME)
        track_missing: Enable missing tracking (default: I18N_TRACK_MISSING)
        initialize: Whether to load the default language immediately (default: True)
        settings: Settings to read defaults from (default: get_settings())

    Returns:
        Translator: Configured translator instance

    Raises:
        CatalogLoadError: If initialize is True and the default language
            cannot be loaded.

    Usage:
        # Use defaults from the environment
        translator = create_translator()

        # Custom directory, lazy initialization
        translator = create_translator(base_path="/opt/app/locales", initialize=False)
        translator.initialize("/opt/app/locales", "ar")
    """
    i18n = (settings or get_settings()).i18n

    if base_path is None:
        base_path = i18n.base_path
    if default_language is None:
        default_language = i18n.default_language
    if source is None:
        source = FileSystemCatalogSource(catalog_filename=i18n.catalog_filename)
    if track_missing is None:
        track_missing = i18n.track_missing

    translator = Translator(
        loader=POTranslationLoader(source=source),
        tracker=MissingTranslationTracker(enabled=track_missing),
    )

    if initialize:
        translator.initialize(base_path, default_language)
        logger.info(
            "translator_created_with_initialize",
            base_path=str(base_path),
            default_language=default_language,
        )
    else:
        logger.info("translator_created_lazy", base_path=str(base_path))

    return translator
