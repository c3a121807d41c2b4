"""Shared fixtures for the linguacore test suite."""

import pytest

from linguacore.configuration import get_settings
from linguacore.i18n import shortcuts


@pytest.fixture(autouse=True)
def reset_process_state():
    """Reset cached settings and the shortcuts' default translator around each test."""
    get_settings.cache_clear()
    shortcuts.set_translator(None)
    yield
    get_settings.cache_clear()
    shortcuts.set_translator(None)
