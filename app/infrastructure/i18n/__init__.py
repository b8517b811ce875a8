"""i18n system - runtime translation and localization.

Loads locale-scoped translation files, resolves keys (following alias
links), substitutes parameters and formats numbers and currencies for the
locale.

Main components:
- providers: TranslationProvider, YAML/INI providers and ProviderRegistry
- models: Parameters variants, locale helpers, tree flattening
- service: TranslationService, the per-locale resolution and caching engine
- context: active service of the current execution context
- facade: module-level helpers forwarding to the active service
- exceptions: ConfigurationError, ParseError, CapabilityUnavailable
"""

from infrastructure.i18n.exceptions import (
    CapabilityUnavailable,
    ConfigurationError,
    I18nError,
    ParseError,
)
from infrastructure.i18n.models import (
    KeyValueParameters,
    NamedParameters,
    ParameterMode,
    Parameters,
    PositionalParameters,
    flatten_translations,
    format_associated_locales,
    main_locale,
    to_http_locale,
)
from infrastructure.i18n.providers import (
    IniTranslationProvider,
    ProviderRegistry,
    TranslationProvider,
    YAMLTranslationProvider,
    get_provider_registry,
)
from infrastructure.i18n.service import GLOBAL_DOMAIN, TranslationService
from infrastructure.i18n.context import active_service
from infrastructure.i18n.factory import create_translation_service

__all__ = [
    "I18nError",
    "ConfigurationError",
    "ParseError",
    "CapabilityUnavailable",
    "Parameters",
    "ParameterMode",
    "PositionalParameters",
    "NamedParameters",
    "KeyValueParameters",
    "flatten_translations",
    "format_associated_locales",
    "main_locale",
    "to_http_locale",
    "TranslationProvider",
    "YAMLTranslationProvider",
    "IniTranslationProvider",
    "ProviderRegistry",
    "get_provider_registry",
    "GLOBAL_DOMAIN",
    "TranslationService",
    "active_service",
    "create_translation_service",
]
