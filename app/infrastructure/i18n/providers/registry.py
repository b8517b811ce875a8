"""Ordered registry of translation providers.

Provider order matters: when two providers define the same key of a
domain, the one registered first wins.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from infrastructure.i18n.providers.base import TranslationProvider
from infrastructure.i18n.providers.ini_provider import IniTranslationProvider
from infrastructure.i18n.providers.yaml_provider import YAMLTranslationProvider
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class ProviderRegistry:
    """Fixed, order-significant list of translation providers."""

    def __init__(self, providers: Optional[Iterable[TranslationProvider]] = None):
        self._providers: List[TranslationProvider] = list(providers or [])

    @property
    def providers(self) -> List[TranslationProvider]:
        return list(self._providers)

    def register(self, provider: TranslationProvider) -> None:
        """Append a provider, after every already registered one."""
        if not isinstance(provider, TranslationProvider):
            raise TypeError(
                f"Provider must subclass TranslationProvider, got {type(provider)}"
            )
        self._providers.append(provider)
        logger.debug("translation_provider_registered", provider=provider.name)

    def get_supported_providers(self) -> List[TranslationProvider]:
        """Providers whose format the runtime can parse, in registration order."""
        return [provider for provider in self._providers if provider.is_supported()]

    def __iter__(self) -> Iterator[TranslationProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def default_providers(lang_folder: Optional[Path] = None) -> List[TranslationProvider]:
    """Build the known providers in precedence order: YAML, then INI."""
    return [
        YAMLTranslationProvider(lang_folder),
        IniTranslationProvider(lang_folder),
    ]


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    """Get the application-scoped provider registry.

    Built once on first call; tests reset it with
    ``get_provider_registry.cache_clear()``.
    """
    registry = ProviderRegistry(default_providers())
    logger.info(
        "initialized_provider_registry",
        providers=[provider.name for provider in registry],
    )
    return registry
