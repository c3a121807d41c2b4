"""Translation catalog settings."""

from pydantic import Field

from linguacore.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Catalog loading and missing-translation tracking configuration.

    Environment Variables:
        I18N_BASE_PATH: Directory holding the language sources (default: locales)
        I18N_DEFAULT_LANGUAGE: Language loaded and activated at startup (default: en)
        I18N_CATALOG_FILENAME: File name inside a language folder (default: messages.po)
        I18N_TRACK_MISSING: Record lookups that fail to resolve (default: False)
        I18N_MISSING_EXPORT_PATH: Where missing entries are exported (default: missing.po)

    Example:
        ```python
        from linguacore.configuration import get_settings

        settings = get_settings()

        if settings.i18n.track_missing:
            translator.enable_missing_tracking()
        ```
    """

    base_path: str = Field(
        default="locales",
        alias="I18N_BASE_PATH",
        description="Directory holding one folder or .po file per language",
    )
    default_language: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language code loaded and activated on initialization",
    )
    catalog_filename: str = Field(
        default="messages.po",
        alias="I18N_CATALOG_FILENAME",
        description="Catalog file name inside <base_path>/<language>/",
    )
    track_missing: bool = Field(
        default=False,
        alias="I18N_TRACK_MISSING",
        description="Enable missing-translation tracking at startup",
    )
    missing_export_path: str = Field(
        default="missing.po",
        alias="I18N_MISSING_EXPORT_PATH",
        description="Default destination for exported missing translations",
    )
