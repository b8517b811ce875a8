"""Feature-level fixtures for i18n system tests.

Provides a temporary translation tree and services reading it.
"""

import pytest
import yaml

from infrastructure.cache import InMemoryCache
from infrastructure.i18n import ProviderRegistry, TranslationService
from infrastructure.i18n.providers import default_providers


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)


def write_ini(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def lang_folder(tmp_path):
    """Create a translation tree.

    Returns a directory structure like:
    - en_US/global.yaml
    - en_US/global.ini
    - en_US/users.ini
    - fr_FR/global.yaml
    - de_DE/global.ini
    """
    root = tmp_path / "locales"

    write_yaml(
        root / "en_US" / "global.yaml",
        {
            "welcome": "Welcome",
            "greeting": "Hello #name#",
            "items_count": "%s has %d items",
            "progress": "%d%% done",
            "home": "%welcome",
            "start": "%home",
            "dangling": "%missing",
            "loop_a": "%loop_b",
            "loop_b": "%loop_a",
            "empty": "",
            "shared": "from yaml",
            "menu": {"file": {"open": "Open", "close": "Close"}},
            "steps": ["First", "Second"],
        },
    )
    write_ini(
        root / "en_US" / "global.ini",
        "; global INI translations\n"
        "shared = from ini\n"
        'ini_only = "INI value"\n'
        "\n"
        "[section]\n"
        "nested_key = In section\n",
    )
    write_ini(
        root / "en_US" / "users.ini",
        '[account]\ncreated = "Account #name# created"\n',
    )
    write_yaml(
        root / "fr_FR" / "global.yaml",
        {
            "welcome": "Bienvenue",
            "decimal_point": ",",
            "thousands_sep": " ",
        },
    )
    write_ini(root / "de_DE" / "global.ini", "welcome = Willkommen\n")

    return root


@pytest.fixture
def registry(lang_folder):
    """Registry of the default providers reading the temporary tree."""
    return ProviderRegistry(default_providers(lang_folder))


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def service(registry, cache):
    """en_US service reading the temporary tree."""
    return TranslationService("en_US", registry=registry, cache=cache)


@pytest.fixture
def fr_service(registry, cache):
    """fr_FR service reading the temporary tree."""
    return TranslationService("fr_FR", registry=registry, cache=cache)
