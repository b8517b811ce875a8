"""Translation cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TranslationCache(ABC):
    """Abstract base class for persisted translation domain caches.

    Stores the flattened translation map of one (locale, domain) pair under
    a composite key so later builds can skip parsing translation files.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, str]]:
        """Get the cached translation map for a key.

        Args:
            key: Cache key (see CacheKeyBuilder).

        Returns:
            Cached translation map, or None on a miss. An empty map is a hit.
        """
        pass

    @abstractmethod
    def set(self, key: str, translations: Dict[str, str]) -> None:
        """Persist a translation map under the given key.

        Args:
            key: Cache key.
            translations: Flattened translation map to store.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all cached entries."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass
