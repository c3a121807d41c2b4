"""Tests for linguacore.i18n.translator module."""

import pytest

from linguacore.i18n import (
    CatalogLoadError,
    Gender,
    InMemoryCatalogSource,
    NotInitializedError,
    POTranslationLoader,
    Translator,
    UnknownLanguageError,
    parse_catalog,
)
from linguacore.i18n.models import TranslationKey


@pytest.mark.unit
class TestTranslatorLifecycle:
    """Tests for initialize/load/switch/clear."""

    def test_new_translator_is_uninitialized(self):
        """A fresh Translator has nothing loaded and rejects lookups."""
        translator = Translator()
        assert translator.get_active_language() is None
        assert translator.get_loaded_languages() == []
        with pytest.raises(NotInitializedError):
            translator.translate("Hello")

    def test_initialize(self, temp_locales_dir, po_loader):
        """initialize() loads and activates the default language."""
        translator = Translator(loader=po_loader)
        translator.initialize(temp_locales_dir, "en")

        assert translator.get_active_language() == "en"
        assert translator.get_loaded_languages() == ["en"]
        assert translator.base_path == temp_locales_dir

    def test_initialize_resets_registry(self, translator, temp_locales_dir):
        """initialize() drops previously loaded languages."""
        translator.initialize(temp_locales_dir, "fr")
        assert translator.get_loaded_languages() == ["fr"]
        assert translator.translate("Hello") == "Bonjour"

    def test_initialize_missing_source(self, temp_locales_dir, po_loader):
        """initialize() raises CatalogLoadError for an unreadable default language."""
        translator = Translator(loader=po_loader)
        with pytest.raises(CatalogLoadError):
            translator.initialize(temp_locales_dir, "xx")
        assert translator.get_active_language() is None
        assert translator.base_path is None

    def test_initialize_empty_default_language(self, temp_locales_dir, po_loader):
        """initialize() rejects a default language with no usable entries."""
        translator = Translator(loader=po_loader)
        with pytest.raises(CatalogLoadError) as exc_info:
            translator.initialize(temp_locales_dir, "empty")

        assert exc_info.value.language == "empty"
        with pytest.raises(NotInitializedError):
            translator.translate("Hello")

    def test_load_keeps_active_language(self, translator):
        """load() installs a catalog without switching to it."""
        translator.load("fr")
        assert translator.get_active_language() == "en"
        assert translator.get_loaded_languages() == ["en", "ar", "fr"]

    def test_load_empty_catalog_allowed(self, translator):
        """load() accepts a source with zero entries after initialization."""
        catalog = translator.load("empty")
        assert len(catalog) == 0
        assert translator.count("empty") == 0

    def test_load_missing_source(self, translator):
        """load() raises CatalogLoadError for an unreadable source."""
        with pytest.raises(CatalogLoadError):
            translator.load("xx")
        assert "xx" not in translator.get_loaded_languages()

    def test_load_before_initialize(self):
        """load() needs a base path from initialize()."""
        with pytest.raises(NotInitializedError):
            Translator().load("en")

    def test_load_replaces_catalog(self, temp_locales_dir, translator):
        """Reloading a language replaces its catalog."""
        (temp_locales_dir / "ar" / "messages.po").write_text(
            'msgid "Bye"\nmsgstr "مع السلامة"\n', encoding="utf-8"
        )
        translator.load("ar")
        assert translator.keys("ar") == [TranslationKey("Bye")]

    def test_load_merge_overlays_catalog(self, temp_locales_dir, translator):
        """load(merge=True) overlays the source onto the loaded catalog."""
        (temp_locales_dir / "ar" / "messages.po").write_text(
            'msgid "Hello"\nmsgstr "أهلا"\n\nmsgid "Bye"\nmsgstr "مع السلامة"\n',
            encoding="utf-8",
        )
        translator.load("ar", merge=True)
        translator.set_active_language("ar")

        assert translator.translate("Hello") == "أهلا"
        assert translator.translate("Bye") == "مع السلامة"
        assert translator.translate("apple") == "تفاحة"

    def test_set_active_language_unknown(self, translator):
        """Switching to an unloaded language raises UnknownLanguageError."""
        with pytest.raises(UnknownLanguageError):
            translator.set_active_language("fr")
        assert translator.get_active_language() == "en"

    def test_clear(self, translator):
        """clear() drops everything and lookups fail until re-initialized."""
        translator.clear()

        assert translator.get_loaded_languages() == []
        assert translator.get_active_language() is None
        with pytest.raises(NotInitializedError):
            translator.translate("Hello")
        with pytest.raises(NotInitializedError):
            translator.has_translation("Hello")
        with pytest.raises(NotInitializedError):
            translator.load("ar")

    def test_switch_scenario(self, tmp_path):
        """en active first, ar after switching, lookups fail after clear."""
        source = InMemoryCatalogSource(
            {
                "en": 'msgid "Hello"\nmsgstr "Hello"\n',
                "ar": 'msgid "Hello"\nmsgstr "مرحبا"\n',
            }
        )
        translator = Translator(loader=POTranslationLoader(source))
        translator.initialize(tmp_path, "en")
        translator.load("ar")

        assert translator.translate("Hello") == "Hello"
        translator.set_active_language("ar")
        assert translator.translate("Hello") == "مرحبا"

        translator.clear()
        with pytest.raises(NotInitializedError):
            translator.translate("Hello")

    def test_instances_are_independent(self, temp_locales_dir, po_loader):
        """Two translators keep separate registries."""
        first = Translator(loader=po_loader)
        second = Translator(loader=po_loader)
        first.initialize(temp_locales_dir, "en")
        second.initialize(temp_locales_dir, "fr")

        assert first.translate("Hello") == "Hello"
        assert second.translate("Hello") == "Bonjour"


@pytest.mark.unit
class TestTranslatorLookup:
    """Tests for translate() and friends."""

    def test_translate_active_language(self, translator):
        """translate() uses the active catalog."""
        translator.set_active_language("ar")
        assert translator.translate("Hello") == "مرحبا"

    def test_translate_missing_falls_back(self, translator):
        """A missing phrase returns the source text unchanged."""
        assert translator.translate("Not in catalog") == "Not in catalog"

    def test_context_scenario(self, translator):
        """Contexts resolve independently and no-context is a third key."""
        assert translator.translate("Play", "music") == "Play track"
        assert translator.translate("Play", "game") == "Start game"
        assert translator.translate("Play") == "Play"
        assert not translator.has_translation("Play")

    def test_empty_context_equals_no_context(self, translator):
        """Passing "" as context behaves like omitting it."""
        assert translator.translate("Hello", "") == translator.translate("Hello")
        assert translator.has_translation("Hello", "")

    def test_translate_with_variables(self, translator):
        """Variables are substituted after resolution."""
        translator.set_active_language("ar")
        assert translator.translate("Welcome {name}", variables={"name": "سارة"}) == "أهلا سارة"

    def test_variables_substituted_in_fallback(self, translator):
        """Variables also apply to the fallback text."""
        result = translator.translate("Bye {name}", variables={"name": "Sara"})
        assert result == "Bye Sara"

    def test_translate_gender(self, translator):
        """Gender picks a variant of the stored body."""
        assert translator.translate("Welcome back") == "Welcome back, sir"
        assert translator.translate("Welcome back", gender=Gender.MALE) == "Welcome back, sir"
        assert translator.translate("Welcome back", gender=Gender.FEMALE) == "Welcome back, madam"
        assert translator.translate("Welcome back", gender="neutral") == "Welcome back"

    def test_translate_gender_neutral_fallback(self, translator):
        """Neutral falls back to the first variant when the body has two."""
        translator.set_active_language("ar")
        assert translator.translate("You are ready", gender=Gender.NEUTRAL) == "أنت جاهز"
        assert translator.translate("You are ready", gender=Gender.FEMALE) == "أنتِ جاهزة"

    def test_translate_gender_on_plain_body(self, translator):
        """Gender is ignored for bodies without variants."""
        assert translator.translate("Hello", gender=Gender.FEMALE) == "Hello"

    def test_translate_invalid_gender(self, translator):
        """An unknown gender raises ValueError."""
        with pytest.raises(ValueError):
            translator.translate("Hello", gender="unknown")

    def test_has_translation_matches_resolution(self, translator):
        """has_translation() is true exactly when translate() does not fall back."""
        translator.enable_missing_tracking()
        for text, context in [("Hello", None), ("Play", "music"), ("Play", None), ("Nope", None)]:
            before = translator.missing_count()
            translator.translate(text, context)
            fell_back = translator.missing_count() > before
            assert translator.has_translation(text, context) is not fell_back

    def test_has_translation_named_language(self, translator):
        """has_translation() can query a named catalog."""
        assert translator.has_translation("You are ready", language="ar")
        assert not translator.has_translation("You are ready")
        with pytest.raises(UnknownLanguageError):
            translator.has_translation("Hello", language="fr")

    def test_count_and_keys(self, translator):
        """count() and keys() read the active or a named catalog."""
        assert translator.count() == 8
        assert translator.count("ar") == 7
        assert TranslationKey("Play", "game") in translator.keys()
        assert TranslationKey("Play", "game") not in translator.keys("ar")

    def test_count_unknown_language(self, translator):
        """Querying an unloaded language raises UnknownLanguageError."""
        with pytest.raises(UnknownLanguageError):
            translator.count("fr")

    def test_get_catalog(self, translator):
        """get_catalog() returns the active catalog by default."""
        assert translator.get_catalog().language == "en"
        assert translator.get_catalog("ar").language == "ar"


@pytest.mark.unit
class TestTranslatorPlural:
    """Tests for translate_plural()."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, "تفاحات"),
            (1, "تفاحة"),
            (2, "تفاحتان"),
            (3, "تفاحات"),
            (10, "تفاحات"),
            (11, "تفاحة"),
            (100, "تفاحة"),
        ],
    )
    def test_word_only(self, translator, count, expected):
        """The word form returns only the selected phrase."""
        translator.set_active_language("ar")
        assert translator.translate_plural(count, "apple", "two apples", "apples") == expected

    def test_counted(self, translator):
        """The counted form prefixes the number and a space."""
        translator.set_active_language("ar")
        assert (
            translator.translate_plural(11, "apple", "two apples", "apples", counted=True)
            == "11 تفاحة"
        )
        assert (
            translator.translate_plural(5, "apple", "two apples", "apples", counted=True)
            == "5 تفاحات"
        )

    def test_each_phrase_resolved_independently(self, translator):
        """Untranslated phrases fall back individually."""
        assert translator.translate_plural(2, "cat", "two cats", "cats") == "two cats"

    def test_plural_with_context(self, translator):
        """Context applies to the selected phrase."""
        assert translator.translate_plural(1, "Play", "Play", "Play", context="game") == "Start game"

    def test_negative_count(self, translator):
        """Negative counts raise ValueError."""
        with pytest.raises(ValueError):
            translator.translate_plural(-1, "apple", "two apples", "apples")


@pytest.mark.unit
class TestTranslatorMissingTracking:
    """Tests for missing-translation tracking through the Translator."""

    def test_tracking_off_by_default(self, translator):
        """No misses are recorded unless tracking is enabled."""
        translator.translate("Nope")
        assert translator.missing_count() == 0

    def test_records_misses_per_language(self, translator):
        """Misses are recorded with the active language and deduplicated."""
        translator.enable_missing_tracking()
        translator.translate("Nope")
        translator.translate("Nope")
        translator.set_active_language("ar")
        translator.translate("Nope")
        translator.translate("Play", "game")
        translator.translate("Hello")

        assert translator.missing_count() == 3
        assert translator.missing_count("ar") == 2

    def test_tracking_does_not_change_results(self, translator):
        """Lookups return the same text with tracking on or off."""
        before = [translator.translate("Nope"), translator.translate("Hello")]
        translator.enable_missing_tracking()
        after = [translator.translate("Nope"), translator.translate("Hello")]
        assert before == after

    def test_export_missing_round_trip(self, translator):
        """Exported misses parse back as empty entries for the tracked keys."""
        translator.enable_missing_tracking()
        translator.set_active_language("ar")
        translator.translate("Play", "game")
        translator.translate_plural(4, "cat", "two cats", "cats")

        entries = parse_catalog(translator.export_missing()).entries

        assert [entry.key for entry in entries] == [
            TranslationKey("Play", "game"),
            TranslationKey("cats"),
        ]
        assert all(entry.body == "" for entry in entries)

    def test_export_missing_to(self, translator, tmp_path):
        """export_missing_to() writes the file."""
        translator.enable_missing_tracking()
        translator.translate("Nope")
        path = tmp_path / "missing.po"

        assert translator.export_missing_to(path) == 1
        assert 'msgid "Nope"' in path.read_text(encoding="utf-8")

    def test_clear_missing(self, translator):
        """clear_missing() empties the tracked set."""
        translator.enable_missing_tracking()
        translator.translate("Nope")
        translator.clear_missing()
        assert translator.missing_count() == 0
        assert translator.export_missing() == ""
