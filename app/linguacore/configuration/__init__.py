"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Catalog settings class
    get_settings: Cached Settings singleton
"""

from linguacore.configuration.i18n import I18nSettings
from linguacore.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
