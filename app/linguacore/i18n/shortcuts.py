"""Call-site shortcuts over a process default Translator.

Short lookup functions in the gettext tradition for host code that does
not want to pass a Translator around. Every function delegates to the
translator returned by get_translator(); install another one with
set_translator().

Usage:
    from linguacore.i18n import shortcuts
    from linguacore.i18n.shortcuts import _, _c, _f, _np

    shortcuts.init("locales", "en")
    shortcuts.load("ar")
    shortcuts.switch("ar")

    title = _("Hello")
    label = _c("music", "Play")
    greeting = _f("Welcome {name}", "name", "Sara")
    apples = _np(3, "apple", "two apples", "apples")
"""

import threading
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from linguacore.configuration import get_settings
from linguacore.i18n.factory import create_translator
from linguacore.i18n.models import Gender, TranslationKey
from linguacore.i18n.translator import Translator
from linguacore.logging import get_module_logger

logger = get_module_logger()

_default_translator: Optional[Translator] = None
_default_translator_lock = threading.Lock()


def get_translator() -> Translator:
    """Get the process default Translator, creating it uninitialized on first use."""
    global _default_translator

    if _default_translator is None:
        with _default_translator_lock:
            if _default_translator is None:
                _default_translator = create_translator(initialize=False)
                logger.debug("default_translator_created")

    return _default_translator


def set_translator(translator: Optional[Translator]) -> None:
    """Install the Translator used by the shortcuts. None resets to lazy default."""
    global _default_translator

    with _default_translator_lock:
        _default_translator = translator


# Lifecycle


def init(
    base_path: Optional[Union[str, Path]] = None,
    default_language: Optional[str] = None,
) -> None:
    """Initialize the default translator; unset arguments come from settings."""
    translator = get_translator()
    if base_path is None or default_language is None:
        i18n = get_settings().i18n
        base_path = base_path if base_path is not None else i18n.base_path
        default_language = default_language or i18n.default_language
    translator.initialize(base_path, default_language)


def load(language: str, merge: bool = False) -> None:
    get_translator().load(language, merge=merge)


def switch(language: str) -> None:
    get_translator().set_active_language(language)


def get_active() -> Optional[str]:
    return get_translator().get_active_language()


def get_loaded() -> List[str]:
    return get_translator().get_loaded_languages()


def clear() -> None:
    get_translator().clear()


# Lookups


def _(text: str, context: Optional[str] = None) -> str:
    return get_translator().translate(text, context)


def _c(context: str, text: str) -> str:
    """Context-first form of ``_(text, context)``."""
    return _(text, context)


def _fd(
    text: str, variables: Mapping[str, Any], context: Optional[str] = None
) -> str:
    """Translate text and substitute placeholders from a mapping."""
    return get_translator().translate(text, context, variables=variables)


def _f(text: str, name: str, value: Any) -> str:
    return _fd(text, {name: value})


def _f2(text: str, name1: str, value1: Any, name2: str, value2: Any) -> str:
    return _fd(text, {name1: value1, name2: value2})


def _f3(
    text: str,
    name1: str,
    value1: Any,
    name2: str,
    value2: Any,
    name3: str,
    value3: Any,
) -> str:
    return _fd(text, {name1: value1, name2: value2, name3: value3})


def _g(text: str, gender: Union[Gender, str], context: Optional[str] = None) -> str:
    """Translate text picking the variant for gender."""
    return get_translator().translate(text, context, gender=gender)


def _gfd(
    text: str,
    gender: Union[Gender, str],
    variables: Mapping[str, Any],
    context: Optional[str] = None,
) -> str:
    return get_translator().translate(
        text, context, gender=gender, variables=variables
    )


def _gf(text: str, gender: Union[Gender, str], name: str, value: Any) -> str:
    return _gfd(text, gender, {name: value})


def _gf2(
    text: str,
    gender: Union[Gender, str],
    name1: str,
    value1: Any,
    name2: str,
    value2: Any,
) -> str:
    return _gfd(text, gender, {name1: value1, name2: value2})


def _n(
    count: int,
    singular: str,
    dual: str,
    plural: str,
    context: Optional[str] = None,
) -> str:
    """Plural word for count, without the number."""
    return get_translator().translate_plural(
        count, singular, dual, plural, context=context
    )


def _np(
    count: int,
    singular: str,
    dual: str,
    plural: str,
    context: Optional[str] = None,
) -> str:
    """Plural word for count, prefixed with the number."""
    return get_translator().translate_plural(
        count, singular, dual, plural, counted=True, context=context
    )


def has(text: str, context: Optional[str] = None) -> bool:
    return get_translator().has_translation(text, context)


def has_c(context: str, text: str) -> bool:
    return has(text, context)


def count(language: Optional[str] = None) -> int:
    return get_translator().count(language)


def keys(language: Optional[str] = None) -> List[TranslationKey]:
    return get_translator().keys(language)


# Missing-translation tracking


def track_missing(enabled: bool = True) -> None:
    get_translator().enable_missing_tracking(enabled)


def missing_count(language: Optional[str] = None) -> int:
    return get_translator().missing_count(language)


def export_missing(
    path: Optional[Union[str, Path]] = None, language: Optional[str] = None
) -> str:
    """Return tracked misses as PO text, also writing it to path when given."""
    translator = get_translator()
    if path is not None:
        translator.export_missing_to(path, language)
    return translator.export_missing(language)


def clear_missing() -> None:
    get_translator().clear_missing()


def save_missing(
    path: Optional[Union[str, Path]] = None, language: Optional[str] = None
) -> int:
    """Write tracked misses to path (default: I18N_MISSING_EXPORT_PATH).

    Returns:
        Number of entries written.
    """
    if path is None:
        path = get_settings().i18n.missing_export_path
    return get_translator().export_missing_to(path, language)
