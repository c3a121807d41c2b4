"""i18n system - runtime translation catalogs.

Loads PO catalogs, resolves phrases by text, context, gender and plural
count, substitutes named variables and tracks lookups that fall back to
the source text.

Main components:
- models: TranslationKey, TranslationEntry, TranslationCatalog, Gender, PluralClass
- parser: parse_catalog and serialize_entries for the PO format
- loader: CatalogSource implementations and POTranslationLoader
- resolvers: gender variant and plural selection
- interpolation: substitute for {name} placeholders
- tracker: MissingTranslationTracker
- translator: Translator, the language manager
- shortcuts: _, _c, _f, _n, ... over a process default Translator
"""

from linguacore.i18n.exceptions import (
    CatalogLoadError,
    I18nError,
    NotInitializedError,
    UnknownLanguageError,
)
from linguacore.i18n.factory import create_translator
from linguacore.i18n.interpolation import substitute
from linguacore.i18n.loader import (
    CatalogSource,
    FileSystemCatalogSource,
    InMemoryCatalogSource,
    POTranslationLoader,
)
from linguacore.i18n.models import (
    Gender,
    MissingEntry,
    PluralClass,
    TranslationCatalog,
    TranslationEntry,
    TranslationKey,
)
from linguacore.i18n.parser import ParseIssue, ParseResult, parse_catalog, serialize_entries
from linguacore.i18n.registry import LanguageRegistry
from linguacore.i18n.resolvers import plural_class, select_gender_variant
from linguacore.i18n.tracker import MissingTranslationTracker
from linguacore.i18n.translator import Translator

__all__ = [
    "I18nError",
    "CatalogLoadError",
    "UnknownLanguageError",
    "NotInitializedError",
    "Gender",
    "PluralClass",
    "TranslationKey",
    "TranslationEntry",
    "TranslationCatalog",
    "MissingEntry",
    "ParseIssue",
    "ParseResult",
    "parse_catalog",
    "serialize_entries",
    "CatalogSource",
    "FileSystemCatalogSource",
    "InMemoryCatalogSource",
    "POTranslationLoader",
    "LanguageRegistry",
    "plural_class",
    "select_gender_variant",
    "substitute",
    "MissingTranslationTracker",
    "Translator",
    "create_translator",
]
