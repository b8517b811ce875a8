"""In-memory translation cache."""

from typing import Any, Dict, Optional

from infrastructure.cache.base import TranslationCache


class InMemoryCache(TranslationCache):
    """Process-local cache, used by tests and single-process deployments.

    Entries are copied on the way in and out so callers never share the
    stored map.
    """

    def __init__(self):
        self._entries: Dict[str, Dict[str, str]] = {}
        self._hits = 0
        self._misses = 0
        self._writes = 0

    def get(self, key: str) -> Optional[Dict[str, str]]:
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return dict(entry)

    def set(self, key: str, translations: Dict[str, str]) -> None:
        self._entries[key] = dict(translations)
        self._writes += 1

    def clear(self) -> None:
        self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "memory",
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "writes": self._writes,
        }
