"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation service using Pydantic BaseSettings with domain-based
organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation lookup settings class (for testing)
    CacheSettings: Translation cache settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    default_locale = settings.i18n.DEFAULT_LOCALE
    caching_enabled = settings.cache.ENABLED

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.infrastructure import CacheSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "I18nSettings", "CacheSettings"]
