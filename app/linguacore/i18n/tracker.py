"""Missing-translation tracking and export.

Records lookup keys that fell back to their source text so the gaps can
be exported as a PO file for translators.
"""

import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from linguacore.i18n.models import MissingEntry, TranslationEntry, TranslationKey
from linguacore.i18n.parser import serialize_entry
from linguacore.logging import get_module_logger

logger = get_module_logger()


class MissingTranslationTracker:
    """Deduplicated, insertion-ordered set of missing (key, language) pairs.

    Recording is a no-op while tracking is disabled. Clearing empties the
    set but leaves tracking enabled.

    Attributes:
        enabled: Whether misses are recorded.
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self._entries: Dict[MissingEntry, None] = {}
        self._lock = threading.RLock()

    def enable(self, enabled: bool = True) -> None:
        self.enabled = enabled
        logger.info("missing_tracking_toggled", enabled=enabled)

    def record(self, key: TranslationKey, language: str) -> bool:
        """Record a miss.

        Keys with empty text are never recorded: ``msgid ""`` is the PO
        header and would not read back as an entry.

        Returns:
            True if this (key, language) pair was newly recorded.
        """
        if not self.enabled or not key.text:
            return False
        entry = MissingEntry(key=key, language=language)
        with self._lock:
            if entry in self._entries:
                return False
            self._entries[entry] = None
        logger.debug(
            "missing_translation_recorded",
            text=key.text,
            context=key.context,
            language=language,
        )
        return True

    def entries(self, language: Optional[str] = None) -> List[MissingEntry]:
        """Recorded entries in insertion order, optionally for one language."""
        with self._lock:
            return [
                entry
                for entry in self._entries
                if language is None or entry.language == language
            ]

    def count(self, language: Optional[str] = None) -> int:
        return len(self.entries(language))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("missing_translations_cleared")

    def export(self, language: Optional[str] = None) -> str:
        """Serialize recorded entries as PO text with empty msgstr values.

        Each block is preceded by a ``# language: <code>`` comment.

        Args:
            language: Only export misses for this language when given.

        Returns:
            PO text, or an empty string if nothing was recorded.
        """
        blocks = [
            serialize_entry(
                TranslationEntry(key=entry.key, body=""),
                comments=[f"language: {entry.language}"],
            )
            for entry in self.entries(language)
        ]
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def export_to(
        self, path: Union[str, Path], language: Optional[str] = None
    ) -> int:
        """Write the exported PO text to path, replacing existing contents.

        Returns:
            Number of entries written.
        """
        with self._lock:
            written = self.count(language)
            Path(path).write_text(self.export(language), encoding="utf-8")
        logger.info(
            "missing_translations_exported",
            path=str(path),
            entry_count=written,
            language=language,
        )
        return written
