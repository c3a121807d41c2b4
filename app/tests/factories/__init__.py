"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    AR_ENTRIES,
    EN_ENTRIES,
    make_entries,
    make_po_source,
    make_translation_catalog,
    make_translation_entry,
    make_translation_key,
)

__all__ = [
    "AR_ENTRIES",
    "EN_ENTRIES",
    "make_entries",
    "make_po_source",
    "make_translation_catalog",
    "make_translation_entry",
    "make_translation_key",
]
