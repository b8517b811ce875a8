"""Translation file providers."""

from infrastructure.i18n.providers.base import TranslationProvider
from infrastructure.i18n.providers.ini_provider import IniTranslationProvider
from infrastructure.i18n.providers.registry import (
    ProviderRegistry,
    default_providers,
    get_provider_registry,
)
from infrastructure.i18n.providers.yaml_provider import YAMLTranslationProvider

__all__ = [
    "TranslationProvider",
    "IniTranslationProvider",
    "YAMLTranslationProvider",
    "ProviderRegistry",
    "default_providers",
    "get_provider_registry",
]
