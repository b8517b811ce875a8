"""Translation cache store.

Persists built translation domains so later processes can skip parsing
translation files.

Usage:

    from infrastructure.cache import CacheKeyBuilder, get_cache

    cache = get_cache()
    key = CacheKeyBuilder("translations").build("fr_FR", "global")

    cached = cache.get(key)
    if cached is None:
        cached = build_translations(...)
        cache.set(key, cached)
"""

from infrastructure.cache.base import TranslationCache
from infrastructure.cache.factory import get_cache, reset_cache
from infrastructure.cache.filesystem import FileSystemCache
from infrastructure.cache.key_builder import CacheKeyBuilder
from infrastructure.cache.memory import InMemoryCache

__all__ = [
    "TranslationCache",
    "get_cache",
    "reset_cache",
    "FileSystemCache",
    "InMemoryCache",
    "CacheKeyBuilder",
]
