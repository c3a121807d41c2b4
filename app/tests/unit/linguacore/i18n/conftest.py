"""Feature-level fixtures for i18n system tests.

Provides catalog directories, loaders and translators for lookup scenarios.
"""

import pytest

from linguacore.i18n import (
    FileSystemCatalogSource,
    InMemoryCatalogSource,
    POTranslationLoader,
    Translator,
)
from linguacore.i18n import shortcuts
from tests.factories.i18n import AR_ENTRIES, EN_ENTRIES, make_po_source


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample PO catalogs.

    Returns a directory structure like:
    - en/messages.po
    - ar/messages.po
    - fr.po            (flat layout)
    - empty/messages.po (comments only)
    """
    (tmp_path / "en").mkdir()
    (tmp_path / "en" / "messages.po").write_text(
        make_po_source(EN_ENTRIES), encoding="utf-8"
    )

    (tmp_path / "ar").mkdir()
    (tmp_path / "ar" / "messages.po").write_text(
        make_po_source(AR_ENTRIES), encoding="utf-8"
    )

    (tmp_path / "fr.po").write_text(
        make_po_source([("Hello", None, "Bonjour")]), encoding="utf-8"
    )

    (tmp_path / "empty").mkdir()
    (tmp_path / "empty" / "messages.po").write_text(
        "# nothing translated yet\n", encoding="utf-8"
    )

    return tmp_path


@pytest.fixture
def po_loader():
    """POTranslationLoader reading from the filesystem."""
    return POTranslationLoader(FileSystemCatalogSource())


@pytest.fixture
def memory_source():
    """InMemoryCatalogSource holding the en and ar samples."""
    return InMemoryCatalogSource(
        {
            "en": make_po_source(EN_ENTRIES),
            "ar": make_po_source(AR_ENTRIES),
        }
    )


@pytest.fixture
def translator(temp_locales_dir, po_loader):
    """Translator initialized with en active and ar loaded."""
    translator = Translator(loader=po_loader)
    translator.initialize(temp_locales_dir, "en")
    translator.load("ar")
    return translator


@pytest.fixture
def default_translator(translator):
    """Install the translator fixture as the shortcuts default."""
    shortcuts.set_translator(translator)
    yield translator
    shortcuts.set_translator(None)
