"""Tests for infrastructure.i18n.providers package."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from infrastructure.i18n import (
    ConfigurationError,
    IniTranslationProvider,
    ParseError,
    ProviderRegistry,
    TranslationProvider,
    YAMLTranslationProvider,
    get_provider_registry,
)
from infrastructure.i18n.providers import default_providers
from infrastructure.services.providers import get_settings

pytestmark = pytest.mark.unit


class TestYAMLTranslationProvider:
    """Tests for YAMLTranslationProvider."""

    def test_resolve_domain_file(self):
        assert YAMLTranslationProvider().resolve_domain_file("users") == "users.yaml"

    def test_is_supported(self):
        assert YAMLTranslationProvider().is_supported() is True

    def test_parse_nested_file(self, tmp_path):
        path = tmp_path / "global.yaml"
        path.write_text("menu:\n  open: Open\nwelcome: Welcome\n", encoding="utf-8")

        assert YAMLTranslationProvider().parse_file(path) == {
            "menu": {"open": "Open"},
            "welcome": "Welcome",
        }

    def test_parse_empty_file(self, tmp_path):
        path = tmp_path / "global.yaml"
        path.write_text("", encoding="utf-8")

        assert YAMLTranslationProvider().parse_file(path) == {}

    def test_parse_malformed_file_raises_parse_error(self, tmp_path):
        path = tmp_path / "global.yaml"
        path.write_text("welcome: [unclosed\n", encoding="utf-8")

        with pytest.raises(ParseError) as exc_info:
            YAMLTranslationProvider().parse_file(path)

        assert exc_info.value.path == path

    def test_parse_non_mapping_raises_parse_error(self, tmp_path):
        path = tmp_path / "global.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ParseError):
            YAMLTranslationProvider().parse_file(path)

    def test_get_domain_translations(self, lang_folder):
        provider = YAMLTranslationProvider(lang_folder)

        translations = provider.get_domain_translations("fr_FR", "global")

        assert translations["welcome"] == "Bienvenue"

    def test_get_domain_translations_missing_file(self, lang_folder):
        provider = YAMLTranslationProvider(lang_folder)

        assert provider.get_domain_translations("de_DE", "global") == {}

    def test_get_locale_domains_ignores_other_formats(self, lang_folder):
        provider = YAMLTranslationProvider(lang_folder)

        assert provider.get_locale_domains("en_US") == ["global"]
        assert provider.get_locale_domains("de_DE") == []


class TestIniTranslationProvider:
    """Tests for IniTranslationProvider."""

    def test_resolve_domain_file(self):
        assert IniTranslationProvider().resolve_domain_file("users") == "users.ini"

    def test_is_supported(self):
        assert IniTranslationProvider().is_supported() is True

    def test_parse_flattens_sections(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text(
            "root_key = Root\n[first]\nfirst_key = First\n[second]\nsecond_key = Second\n",
            encoding="utf-8",
        )

        assert IniTranslationProvider().parse_file(path) == {
            "root_key": "Root",
            "first_key": "First",
            "second_key": "Second",
        }

    def test_parse_later_key_wins(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text(
            "welcome = First\n[section]\nwelcome = Second\n", encoding="utf-8"
        )

        assert IniTranslationProvider().parse_file(path) == {"welcome": "Second"}

    def test_parse_keeps_raw_values(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text(
            "; comment\n"
            "# another comment\n"
            'quoted = "Hello #name#"\n'
            "alias = %quoted\n"
            "CamelKey = Case kept\n"
            "semicolon = a; b\n",
            encoding="utf-8",
        )

        assert IniTranslationProvider().parse_file(path) == {
            "quoted": "Hello #name#",
            "alias": "%quoted",
            "CamelKey": "Case kept",
            "semicolon": "a; b",
        }

    def test_parse_strips_inline_comments(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text(
            "welcome = Welcome ; shown on the home page\n"
            "tight = a;b\n",
            encoding="utf-8",
        )

        assert IniTranslationProvider().parse_file(path) == {
            "welcome": "Welcome",
            "tight": "a;b",
        }

    def test_parse_indented_line_continues_value(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text(
            "intro = First line\n    second line\nflag = true\n", encoding="utf-8"
        )

        assert IniTranslationProvider().parse_file(path) == {
            "intro": "First line\nsecond line",
            "flag": "true",
        }

    def test_parse_malformed_file_raises_parse_error(self, tmp_path):
        path = tmp_path / "global.ini"
        path.write_text("[unclosed\nkey = value\n", encoding="utf-8")

        with pytest.raises(ParseError) as exc_info:
            IniTranslationProvider().parse_file(path)

        assert exc_info.value.path == path

    def test_get_locale_domains(self, lang_folder):
        provider = IniTranslationProvider(lang_folder)

        assert provider.get_locale_domains("en_US") == ["global", "users"]


class TestTranslationProvider:
    """Tests for the shared folder layout of TranslationProvider."""

    def test_get_locales(self, lang_folder):
        (lang_folder / ".hidden").mkdir()
        (lang_folder / "README").write_text("not a locale", encoding="utf-8")

        provider = YAMLTranslationProvider(lang_folder)

        assert provider.get_locales() == ["de_DE", "en_US", "fr_FR"]

    def test_get_locales_missing_folder_raises_configuration_error(self, tmp_path):
        provider = YAMLTranslationProvider(tmp_path / "missing")

        with pytest.raises(ConfigurationError):
            provider.get_locales()

    def test_get_locale_path_missing_locale_raises_configuration_error(
        self, lang_folder
    ):
        provider = IniTranslationProvider(lang_folder)

        with pytest.raises(ConfigurationError):
            provider.get_locale_path("xx_XX")

    def test_lang_folder_defaults_to_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("I18N_LANG_FOLDER", str(tmp_path))
        get_settings.cache_clear()

        assert YAMLTranslationProvider().lang_folder == Path(tmp_path)

    def test_explicit_lang_folder(self, tmp_path):
        assert IniTranslationProvider(tmp_path).lang_folder == tmp_path


class TestProviderRegistry:
    """Tests for ProviderRegistry."""

    def test_register_keeps_order(self):
        registry = ProviderRegistry()
        yaml_provider = YAMLTranslationProvider()
        ini_provider = IniTranslationProvider()

        registry.register(yaml_provider)
        registry.register(ini_provider)

        assert registry.providers == [yaml_provider, ini_provider]
        assert list(registry) == [yaml_provider, ini_provider]
        assert len(registry) == 2

    def test_register_rejects_non_provider(self):
        with pytest.raises(TypeError):
            ProviderRegistry().register(object())

    def test_providers_returns_copy(self):
        registry = ProviderRegistry([YAMLTranslationProvider()])

        registry.providers.clear()

        assert len(registry) == 1

    def test_get_supported_providers(self):
        supported = Mock(spec=TranslationProvider)
        supported.is_supported.return_value = True
        unsupported = Mock(spec=TranslationProvider)
        unsupported.is_supported.return_value = False

        registry = ProviderRegistry([unsupported, supported])

        assert registry.get_supported_providers() == [supported]

    def test_default_providers_order(self, tmp_path):
        providers = default_providers(tmp_path)

        assert [provider.name for provider in providers] == ["yaml", "ini"]
        assert all(provider.lang_folder == tmp_path for provider in providers)

    def test_get_provider_registry_is_singleton(self):
        registry = get_provider_registry()

        assert get_provider_registry() is registry
        assert [provider.name for provider in registry] == ["yaml", "ini"]
