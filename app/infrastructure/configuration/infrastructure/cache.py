"""Translation cache infrastructure settings."""

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Persisted cache of built translation domains.

    Environment Variables:
        TRANSLATION_CACHE_ENABLED: Reuse persisted domains instead of parsing
            translation files on every build (default: True)
        TRANSLATION_CACHE_BACKEND: "filesystem" or "memory" (default: filesystem)
        TRANSLATION_CACHE_CACHE_DIR: Folder of the filesystem backend
            (default: <tmp>/translation-cache)
        TRANSLATION_CACHE_NAMESPACE: Prefix of every cache key (default: translations)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.cache.ENABLED:
            cache_dir = settings.cache.CACHE_DIR
        ```
    """

    model_config = SettingsConfigDict(env_prefix="TRANSLATION_CACHE_")

    ENABLED: bool = Field(
        default=True,
        description="Application-level switch for the persisted domain cache",
    )

    BACKEND: Literal["filesystem", "memory"] = Field(
        default="filesystem",
        description="Cache store implementation",
    )

    CACHE_DIR: Path = Field(
        default=Path(tempfile.gettempdir()) / "translation-cache",
        description="Folder of the filesystem cache store",
    )

    NAMESPACE: str = Field(
        default="translations",
        description="Namespace prefix of cache keys",
    )
