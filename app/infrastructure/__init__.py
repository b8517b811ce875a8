"""Infrastructure modules for the translation service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger, configure_logging)
- services: Dependency injection providers (get_settings)
- cache: Persisted translation domain cache (TranslationCache, get_cache)
- i18n: Translation providers, TranslationService and helpers
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

# Dependency Injection Services
from infrastructure.services import get_settings

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
    # Dependency Injection Services
    "get_settings",
]
