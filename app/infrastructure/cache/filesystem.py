"""Filesystem-backed translation cache.

Each cache key is stored as one JSON document under the cache directory.
Writes go through a temporary file in the same directory followed by
``os.replace`` so a reader never observes a partially written entry.
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from infrastructure.cache.base import TranslationCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_UNSAFE_CHARS = re.compile(r"[^\w.-]")


class FileSystemCache(TranslationCache):
    """Translation cache storing one JSON file per key.

    Attributes:
        cache_dir: Directory holding the cache files.
    """

    def __init__(self, cache_dir: Path):
        """Initialize the filesystem cache.

        Args:
            cache_dir: Directory for cache files, created when missing.
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self._hits = 0
        self._misses = 0
        self._writes = 0

        logger.info("initialized_filesystem_cache", cache_dir=str(self.cache_dir))

    def path_for(self, key: str) -> Path:
        """Return the file path storing a key."""
        return self.cache_dir / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[Dict[str, str]]:
        """Read a cached translation map.

        A missing file is a miss. An unreadable or corrupt file is logged
        and also treated as a miss, so the caller rebuilds and overwrites it.
        """
        path = self.path_for(key)
        if not path.is_file():
            self._misses += 1
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("cache_entry_unreadable", key=key, error=str(e))
            self._misses += 1
            return None

        if not isinstance(data, dict):
            logger.warning("cache_entry_invalid", key=key, expected="object")
            self._misses += 1
            return None

        self._hits += 1
        return data

    def set(self, key: str, translations: Dict[str, str]) -> None:
        """Atomically write a translation map to its cache file."""
        path = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.cache_dir, prefix=".tmp-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(translations, f, ensure_ascii=False, sort_keys=True)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self._writes += 1
        logger.debug("cache_entry_written", key=key, entry_count=len(translations))

    def clear(self) -> None:
        """Delete every cache file of this directory."""
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            path.unlink(missing_ok=True)
            removed += 1
        logger.info("cleared_translation_cache", removed=removed)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "filesystem",
            "cache_dir": str(self.cache_dir),
            "entries": sum(1 for _ in self.cache_dir.glob("*.json")),
            "hits": self._hits,
            "misses": self._misses,
            "writes": self._writes,
        }
