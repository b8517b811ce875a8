"""Factory functions for creating translation services.

Provides convenience functions for initializing services with default
collaborators or with an explicit translation tree.
"""

from pathlib import Path
from typing import Optional

from infrastructure.cache import TranslationCache
from infrastructure.i18n.providers import ProviderRegistry, default_providers
from infrastructure.i18n.service import TranslationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_translation_service(
    locale: Optional[str] = None,
    lang_folder: Optional[Path] = None,
    cache: Optional[TranslationCache] = None,
    activate: bool = False,
) -> TranslationService:
    """Create or reuse a TranslationService.

    Without a language folder, the application registry is used and the
    active service is reused when it matches the requested locale. With a
    language folder, a dedicated registry reading that folder is built.

    Args:
        locale: Locale to serve (default: the active locale).
        lang_folder: Translation tree to read instead of settings.i18n.LANG_FOLDER.
        cache: Translation cache (default: application cache).
        activate: Install the service as the active one.

    Returns:
        TranslationService: Configured service

    Usage:
        # Active locale, default translation tree
        service = create_translation_service()

        # Another locale from a custom tree
        service = create_translation_service("fr_FR", lang_folder=Path("/srv/lang"))
    """
    if lang_folder is not None:
        registry = ProviderRegistry(default_providers(lang_folder))
        service = TranslationService(
            locale or TranslationService.get_default_locale(),
            registry=registry,
            cache=cache,
        )
    elif cache is not None:
        service = TranslationService(
            locale or TranslationService.get_default_locale(), cache=cache
        )
    elif locale is None:
        service = TranslationService.get_active()
    else:
        service = TranslationService.get_instance(locale)

    if activate:
        service.set_active()

    logger.info(
        "translation_service_created",
        locale=service.locale,
        lang_folder=str(lang_folder) if lang_folder is not None else None,
        activated=activate,
    )
    return service
