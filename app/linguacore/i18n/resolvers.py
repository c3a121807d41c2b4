"""Resolution of stored bodies into displayable strings.

Selects gender variants from pipe-delimited bodies and plural forms from
counts. Lookups that miss fall back to the source text.
"""

from dataclasses import dataclass
from typing import Optional, Union

from linguacore.i18n.models import (
    Gender,
    PluralClass,
    TranslationCatalog,
    TranslationKey,
)

GENDER_DELIMITER = "|"

_GENDER_INDEX = {
    Gender.MALE: 0,
    Gender.FEMALE: 1,
    Gender.NEUTRAL: 2,
}


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a key against a catalog.

    Attributes:
        key: The key that was looked up.
        text: Selected body, or the source text when not found.
        found: False when the fallback path was taken.
    """

    key: TranslationKey
    text: str
    found: bool


def select_gender_variant(
    body: str, gender: Optional[Union[Gender, str]] = None
) -> str:
    """Pick the variant of a ``male|female|neutral`` body.

    Bodies without a delimiter are returned whole regardless of gender.
    Without a gender the first (male/default) variant is used. A missing
    neutral variant falls back to the first one.
    """
    if GENDER_DELIMITER not in body:
        return body

    variants = body.split(GENDER_DELIMITER)
    if gender is None:
        return variants[0]

    index = _GENDER_INDEX[Gender.from_value(gender)]
    if index >= len(variants):
        return variants[0]
    return variants[index]


def plural_class(count: int) -> PluralClass:
    """Classify a count: 0 and 3-10 plural, 1 and 11+ singular, 2 dual."""
    return PluralClass.from_count(count)


def select_plural(count: int, singular: str, dual: str, plural: str) -> str:
    """Pick which of three source phrases applies to a count."""
    return {
        PluralClass.SINGULAR: singular,
        PluralClass.DUAL: dual,
        PluralClass.PLURAL: plural,
    }[plural_class(count)]


def resolve(
    catalog: TranslationCatalog,
    key: TranslationKey,
    gender: Optional[Union[Gender, str]] = None,
) -> Resolution:
    """Resolve a key against a catalog.

    Args:
        catalog: Catalog to look the key up in.
        key: Text and optional context.
        gender: Optional gender used to pick a variant.

    Returns:
        Resolution with the selected variant, or the untouched source text
        and ``found=False`` when the key is absent.
    """
    body = catalog.get_body(key)
    if body is None:
        return Resolution(key=key, text=key.text, found=False)
    return Resolution(key=key, text=select_gender_variant(body, gender), found=True)
