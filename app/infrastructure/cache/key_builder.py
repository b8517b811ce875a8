"""Cache key builder for translation domains."""


class CacheKeyBuilder:
    """Build deterministic translation cache keys.

    Example:
        >>> builder = CacheKeyBuilder(namespace="translations")
        >>> builder.build(locale="fr_FR", domain="global")
        'translations-fr_FR-global'
    """

    def __init__(self, namespace: str):
        """Initialize key builder.

        Args:
            namespace: Namespace for key isolation (e.g., "translations")
        """
        self.namespace = namespace

    def build(self, locale: str, domain: str) -> str:
        """Build the cache key of one (locale, domain) pair."""
        return f"{self.namespace}-{locale}-{domain}"
