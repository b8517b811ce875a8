"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings and CacheSettings defaults and environment overrides
- Settings aggregation
- get_settings() singleton
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.configuration import CacheSettings, I18nSettings, Settings
from infrastructure.services.providers import get_settings

pytestmark = pytest.mark.unit


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("I18N_DEFAULT_LOCALE", raising=False)
        monkeypatch.delenv("I18N_LANG_FOLDER", raising=False)

        i18n = I18nSettings()

        assert i18n.DEFAULT_LOCALE == "en_US"
        assert i18n.MAX_ALIAS_HOPS == 32
        assert i18n.LANG_FOLDER.name == "locales"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("I18N_LANG_FOLDER", str(tmp_path))
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "fr_FR")
        monkeypatch.setenv("I18N_MAX_ALIAS_HOPS", "4")

        i18n = I18nSettings()

        assert i18n.LANG_FOLDER == Path(tmp_path)
        assert i18n.DEFAULT_LOCALE == "fr_FR"
        assert i18n.MAX_ALIAS_HOPS == 4

    def test_max_alias_hops_must_be_positive(self):
        with pytest.raises(ValidationError):
            I18nSettings(MAX_ALIAS_HOPS=0)


class TestCacheSettings:
    """Test suite for CacheSettings configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TRANSLATION_CACHE_BACKEND", raising=False)

        cache = CacheSettings()

        assert cache.ENABLED is True
        assert cache.BACKEND == "filesystem"
        assert cache.NAMESPACE == "translations"
        assert cache.CACHE_DIR.name == "translation-cache"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRANSLATION_CACHE_ENABLED", "false")
        monkeypatch.setenv("TRANSLATION_CACHE_BACKEND", "memory")
        monkeypatch.setenv("TRANSLATION_CACHE_CACHE_DIR", str(tmp_path))
        monkeypatch.setenv("TRANSLATION_CACHE_NAMESPACE", "app")

        cache = CacheSettings()

        assert cache.ENABLED is False
        assert cache.BACKEND == "memory"
        assert cache.CACHE_DIR == Path(tmp_path)
        assert cache.NAMESPACE == "app"

    def test_unknown_backend_is_rejected(self):
        with pytest.raises(ValidationError):
            CacheSettings(BACKEND="redis")


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_are_instantiated(self):
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert isinstance(settings.cache, CacheSettings)

    def test_explicit_subsettings_are_kept(self):
        i18n = I18nSettings(DEFAULT_LOCALE="de_DE")

        settings = Settings(i18n=i18n)

        assert settings.i18n.DEFAULT_LOCALE == "de_DE"

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_get_settings_reads_environment(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "it_IT")
        get_settings.cache_clear()

        assert get_settings().i18n.DEFAULT_LOCALE == "it_IT"
