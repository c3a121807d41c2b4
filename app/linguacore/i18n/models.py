"""Translation models for the catalog engine.

Defines the lookup key, parsed entries, per-language catalogs and the
resolver-time inputs (gender and plural class).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Union


class Gender(str, Enum):
    """Grammatical gender used to pick a pipe-delimited body variant."""

    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"

    @classmethod
    def from_value(cls, value: Union["Gender", str]) -> "Gender":
        """Convert a string (case-insensitive) or Gender to Gender.

        Raises:
            ValueError: If value does not name a gender.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise ValueError(f"Unsupported gender: {value}") from e


class PluralClass(str, Enum):
    """Plural class selected from a count by the fixed Arabic-family rule.

    | count | class    |
    |-------|----------|
    | 0     | plural   |
    | 1     | singular |
    | 2     | dual     |
    | 3-10  | plural   |
    | 11+   | singular |
    """

    SINGULAR = "singular"
    DUAL = "dual"
    PLURAL = "plural"

    @classmethod
    def from_count(cls, count: int) -> "PluralClass":
        """Classify a non-negative count.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"Plural count must be non-negative: {count}")
        if count == 1 or count >= 11:
            return cls.SINGULAR
        if count == 2:
            return cls.DUAL
        return cls.PLURAL


@dataclass(frozen=True)
class TranslationKey:
    """Identity of a lookup: source text plus optional context.

    An empty context is normalised to None, so ``TranslationKey("Play", "")``
    and ``TranslationKey("Play")`` are the same key. Comparison is exact and
    case-sensitive. Frozen to ensure hashability.

    Attributes:
        text: Source phrase (msgid).
        context: Optional disambiguating qualifier (msgctxt).
    """

    text: str
    context: Optional[str] = None

    def __post_init__(self):
        if self.context == "":
            object.__setattr__(self, "context", None)

    def __str__(self) -> str:
        if self.context is None:
            return self.text
        return f"{self.context}::{self.text}"


@dataclass(frozen=True)
class TranslationEntry:
    """One parsed record: a key and its raw stored body (msgstr).

    The body may encode gender variants as ``male|female|neutral``.
    """

    key: TranslationKey
    body: str

    @property
    def is_translated(self) -> bool:
        """An empty msgstr means the entry has not been translated yet."""
        return self.body != ""


@dataclass(frozen=True)
class MissingEntry:
    """A lookup key that failed to resolve under a given language."""

    key: TranslationKey
    language: str


@dataclass
class TranslationCatalog:
    """Container for all translations of one language.

    Keys are unique; setting an existing key replaces it (last write wins).
    Untranslated entries (empty body) are not stored.

    Attributes:
        language: Language code this catalog is for.
        entries: Mapping of TranslationKey to TranslationEntry.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    language: str
    entries: Dict[TranslationKey, TranslationEntry] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    @classmethod
    def from_entries(
        cls,
        language: str,
        entries: Iterable[TranslationEntry],
        loaded_at: Optional[str] = None,
    ) -> "TranslationCatalog":
        """Build a catalog from parsed entries, in order."""
        catalog = cls(language=language, loaded_at=loaded_at)
        for entry in entries:
            catalog.set_entry(entry)
        return catalog

    def set_entry(self, entry: TranslationEntry) -> bool:
        """Install an entry, replacing any entry with the same key.

        Returns:
            True if the entry was stored, False if it was untranslated.
        """
        if not entry.is_translated:
            return False
        self.entries[entry.key] = entry
        return True

    def get_body(self, key: TranslationKey) -> Optional[str]:
        """Retrieve the raw body for a key.

        Returns:
            Stored body, or None if the key is not in the catalog.
        """
        entry = self.entries.get(key)
        return entry.body if entry else None

    def has_entry(self, key: TranslationKey) -> bool:
        return key in self.entries

    def keys(self) -> List[TranslationKey]:
        return list(self.entries.keys())

    def merge(self, other: "TranslationCatalog") -> None:
        """Overlay another catalog onto this one. Later entries override earlier ones."""
        self.entries.update(other.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TranslationEntry]:
        return iter(self.entries.values())
