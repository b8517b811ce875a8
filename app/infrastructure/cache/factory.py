"""Translation cache factory."""

from typing import Optional

from infrastructure.cache.base import TranslationCache
from infrastructure.cache.filesystem import FileSystemCache
from infrastructure.cache.memory import InMemoryCache
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

# Singleton cache instance
_cache_instance: Optional[TranslationCache] = None


def get_cache() -> TranslationCache:
    """Get the translation cache singleton.

    The backend is selected by ``settings.cache.BACKEND``.

    Returns:
        FileSystemCache or InMemoryCache instance.
    """
    global _cache_instance

    if _cache_instance is not None:
        return _cache_instance

    cache_settings = get_settings().cache
    if cache_settings.BACKEND == "memory":
        _cache_instance = InMemoryCache()
    else:
        _cache_instance = FileSystemCache(cache_settings.CACHE_DIR)
    logger.info("initialized_translation_cache", backend=cache_settings.BACKEND)

    return _cache_instance


def reset_cache() -> None:
    """Reset the cache singleton (for testing only)."""
    global _cache_instance
    _cache_instance = None
    logger.debug("reset_cache_singleton")
