"""Catalog source and loading interface.

Defines the byte source contract used to fetch a language's PO source and
the loader that turns those bytes into a TranslationCatalog.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

from linguacore.i18n.exceptions import CatalogLoadError
from linguacore.i18n.models import TranslationCatalog
from linguacore.i18n.parser import ParseResult, parse_catalog
from linguacore.logging import get_module_logger

logger = get_module_logger()


class CatalogSource(ABC):
    """Abstract provider of raw catalog bytes.

    Implementations only locate and read a language's source; parsing is
    done by the loader.
    """

    @abstractmethod
    def read(self, language: str, base_path: Union[str, Path]) -> bytes:
        """Read the raw source for a language.

        Args:
            language: Language code (e.g., "en", "ar").
            base_path: Root location of the language sources.

        Returns:
            Raw bytes of the source.

        Raises:
            FileNotFoundError: If no source exists for the language.
            OSError: If the source exists but cannot be read.
        """
        pass


class FileSystemCatalogSource(CatalogSource):
    """Reads ``<base>/<language>/<catalog_filename>`` or ``<base>/<language>.po``.

    Attributes:
        catalog_filename: File name looked up inside a language folder.
    """

    def __init__(self, catalog_filename: str = "messages.po"):
        self.catalog_filename = catalog_filename

    def candidates(self, language: str, base_path: Union[str, Path]) -> list:
        """Paths tried for a language, in order."""
        base = Path(base_path)
        return [
            base / language / self.catalog_filename,
            base / f"{language}.po",
        ]

    def read(self, language: str, base_path: Union[str, Path]) -> bytes:
        for path in self.candidates(language, base_path):
            if path.is_file():
                logger.debug("reading_catalog_file", language=language, path=str(path))
                return path.read_bytes()
        raise FileNotFoundError(
            f"No catalog found for language {language} in {base_path}"
        )


class InMemoryCatalogSource(CatalogSource):
    """Serves catalog sources held in memory, keyed by language code.

    The base path is ignored. Useful for embedding catalogs and for tests.
    """

    def __init__(self, sources: Optional[Dict[str, Union[bytes, str]]] = None):
        self.sources: Dict[str, Union[bytes, str]] = dict(sources or {})

    def add(self, language: str, data: Union[bytes, str]) -> None:
        self.sources[language] = data

    def read(self, language: str, base_path: Union[str, Path]) -> bytes:
        if language not in self.sources:
            raise FileNotFoundError(f"No in-memory catalog for language {language}")
        data = self.sources[language]
        return data.encode("utf-8") if isinstance(data, str) else data


class POTranslationLoader:
    """Loader for PO catalogs read through a CatalogSource.

    Attributes:
        source: CatalogSource supplying raw bytes.
    """

    def __init__(self, source: Optional[CatalogSource] = None):
        """Initialize PO translation loader.

        Args:
            source: Byte source to read from (default: FileSystemCatalogSource).
        """
        self.source = source or FileSystemCatalogSource()

    def read_entries(self, language: str, base_path: Union[str, Path]) -> ParseResult:
        """Read and parse a language's source without building a catalog.

        Raises:
            CatalogLoadError: If the source cannot be read or decoded.
        """
        try:
            data = self.source.read(language, base_path)
        except OSError as e:
            logger.error(
                "catalog_read_failed",
                language=language,
                base_path=str(base_path),
                error=str(e),
            )
            raise CatalogLoadError(
                f"Could not read catalog for language '{language}': {e}",
                language=language,
            ) from e

        try:
            return parse_catalog(data)
        except UnicodeDecodeError as e:
            logger.error("catalog_decode_failed", language=language, error=str(e))
            raise CatalogLoadError(
                f"Catalog for language '{language}' is not valid UTF-8: {e}",
                language=language,
            ) from e

    def load(self, language: str, base_path: Union[str, Path]) -> TranslationCatalog:
        """Load the catalog for a language.

        Duplicate keys resolve last-write-wins and untranslated entries are
        dropped, so the catalog may hold fewer entries than were parsed.

        Args:
            language: Language code to load.
            base_path: Root location of the language sources.

        Returns:
            TranslationCatalog for the language (possibly empty).

        Raises:
            CatalogLoadError: If the source cannot be read or decoded.
        """
        result = self.read_entries(language, base_path)
        catalog = TranslationCatalog.from_entries(
            language,
            result.entries,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

        logger.info(
            "loaded_translations",
            language=language,
            parsed_count=len(result.entries),
            entry_count=len(catalog),
            skipped_blocks=len(result.issues),
        )
        return catalog
