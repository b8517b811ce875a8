"""Shared fixtures for the translation service tests.

Every test starts from fresh settings, provider registry, translation cache
and active service, with the in-memory cache backend selected.
"""

import locale

import pytest

from infrastructure.cache import reset_cache
from infrastructure.i18n.context import reset_active_service
from infrastructure.i18n.providers import get_provider_registry
from infrastructure.services.providers import get_settings


def _reset_singletons():
    get_settings.cache_clear()
    get_provider_registry.cache_clear()
    reset_cache()
    reset_active_service()


@pytest.fixture(autouse=True)
def isolated_translation_state(monkeypatch, tmp_path):
    """Reset application singletons around each test."""
    monkeypatch.setenv("TRANSLATION_CACHE_BACKEND", "memory")
    monkeypatch.setenv(
        "TRANSLATION_CACHE_CACHE_DIR", str(tmp_path / "translation-cache")
    )
    _reset_singletons()

    # setup() of an activated service changes the process locale
    process_locale = locale.setlocale(locale.LC_ALL)
    yield
    locale.setlocale(locale.LC_ALL, process_locale)

    _reset_singletons()
