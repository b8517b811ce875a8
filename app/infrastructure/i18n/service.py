"""Translation service resolving keys of locale-scoped translation domains.

A service is bound to one locale and owns a lazily built map of
domain -> flattened translations. Domains are built from the supported
providers (first registered provider wins on a key collision) or read back
from the persisted translation cache.

Usage:
    from infrastructure.i18n import TranslationService

    service = TranslationService("fr_FR")
    service.translate("welcome")                          # "Bienvenue"
    service.translate("greeting", "users", {"name": "Ann"})
    service.translate("items_count", "global", ["Bob", 3])
"""

from locale import LC_ALL, Error as LocaleError, localeconv, setlocale
from typing import Any, Dict, List, Optional, Union

from infrastructure.cache import CacheKeyBuilder, TranslationCache, get_cache
from infrastructure.configuration import Settings
from infrastructure.i18n import context, formatting
from infrastructure.i18n.exceptions import ConfigurationError
from infrastructure.i18n.formatting import CurrencyFormatter, Number
from infrastructure.i18n.models import (
    ALIAS_MARKER,
    Parameters,
    main_locale,
    merge_translation_trees,
    to_http_locale,
)
from infrastructure.i18n.providers import ProviderRegistry, get_provider_registry
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

GLOBAL_DOMAIN = "global"


class TranslationService:
    """Per-locale translation service.

    Domains move from unbuilt to built on first access or on an explicit
    build_domain() call; a built domain can be rebuilt in place but never
    becomes unbuilt again. Instances do no locking: concurrent builds of
    the same domain on one instance must be serialized by the caller.

    Attributes:
        registry: Providers aggregated when a domain is built.
        cache: Persisted store of built domains.
        settings: Application settings.
        translations: Built domains, domain -> key -> value.
    """

    def __init__(
        self,
        locale: str,
        registry: Optional[ProviderRegistry] = None,
        cache: Optional[TranslationCache] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize a service for a locale.

        Args:
            locale: Locale code (e.g., "en_US").
            registry: Provider registry; the application registry by default.
            cache: Translation cache; the application cache by default.
            settings: Settings; the application settings by default.
        """
        self._locale = locale
        self.settings = settings if settings is not None else get_settings()
        self.registry = registry if registry is not None else get_provider_registry()
        self.cache = cache if cache is not None else get_cache()
        self.cache_keys = CacheKeyBuilder(self.settings.cache.NAMESPACE)
        self.translations: Dict[str, Dict[str, str]] = {}
        self._currency_formatter: Optional[CurrencyFormatter] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self._locale!r})"

    @property
    def locale(self) -> str:
        return self._locale

    # Active instance

    @classmethod
    def get_instance(cls, locale: str) -> "TranslationService":
        """Get a service for a locale.

        Returns the active service when it has this locale, a new
        (uncached) service otherwise.
        """
        if cls.get_active_locale() == locale:
            return cls.get_active()
        return cls(locale)

    @classmethod
    def get_active(cls) -> "TranslationService":
        """Get the active service, creating it with the default locale if needed."""
        service = context.get_active_service()
        if service is None:
            service = cls(cls.get_default_locale())
            context.set_active_service(service)
            service.setup()
            logger.info("active_translation_service_created", locale=service.locale)
        return service

    @classmethod
    def get_active_locale(cls) -> str:
        return cls.get_active().locale

    @staticmethod
    def get_default_locale() -> str:
        return get_settings().i18n.DEFAULT_LOCALE

    def set_active(self) -> None:
        """Install this service as the active one and set up the process locale."""
        context.set_active_service(self)
        self.setup()
        logger.info("active_translation_service_changed", locale=self.locale)

    def setup(self) -> None:
        """Set the process locale from the "locale" key of the global domain.

        Falls back to the service locale. A locale the OS does not provide
        is logged and the current process locale is kept.
        """
        process_locale = self.get_translation("locale", GLOBAL_DOMAIN) or self.locale
        try:
            setlocale(LC_ALL, process_locale)
        except LocaleError as e:
            logger.warning(
                "process_locale_unavailable", locale=process_locale, error=str(e)
            )

    # Domains

    def is_domain_built(self, domain: str) -> bool:
        return domain in self.translations

    def build_domain(self, domain: str, force: bool = False) -> Dict[str, str]:
        """Build a domain and store it in the service.

        Unless forced (or caching is disabled), a persisted cache entry is
        used as is. Otherwise each supported provider tree is flattened and
        merged in registry order (first provider wins per key) and persisted.

        Args:
            domain: Domain to build.
            force: Skip the cache lookup and re-read the translation files.

        Returns:
            Flattened translations of the domain.
        """
        force = force or not self.settings.cache.ENABLED
        cache_key = self.cache_keys.build(self.locale, domain)

        translations = None if force else self.cache.get(cache_key)
        if translations is None:
            translations = self._aggregate_providers(domain)
            self.cache.set(cache_key, translations)
            logger.info(
                "domain_built",
                locale=self.locale,
                domain=domain,
                key_count=len(translations),
                forced=force,
            )
        else:
            logger.debug("domain_loaded_from_cache", locale=self.locale, domain=domain)

        self.translations[domain] = translations
        return translations

    def _aggregate_providers(self, domain: str) -> Dict[str, str]:
        trees = (
            provider.get_domain_translations(self.locale, domain)
            for provider in self.registry.get_supported_providers()
        )
        return merge_translation_trees(trees)

    def get_domain_translations(self, domain: str) -> Dict[str, str]:
        if not self.is_domain_built(domain):
            self.build_domain(domain)
        return self.translations[domain]

    def guess_available_domains(self) -> List[str]:
        """Domains of this locale across all supported providers, deduplicated."""
        domains: Dict[str, None] = {}
        for provider in self.registry.get_supported_providers():
            domains.update(dict.fromkeys(provider.get_locale_domains(self.locale)))
        return list(domains)

    def guess_available_locales(self) -> List[str]:
        """Locales found by all supported providers, deduplicated."""
        locales: Dict[str, None] = {}
        for provider in self.registry.get_supported_providers():
            locales.update(dict.fromkeys(provider.get_locales()))
        return list(locales)

    # Lookup

    def get_translation(
        self, key: str, domain: str, resolve_links: bool = False
    ) -> Optional[str]:
        """Look up a key in a domain.

        With resolve_links, a value starting with "%" is a link to another
        key of the same domain, followed until a literal value or a missing
        key is reached.

        Returns:
            Translation, or None if the key (or a linked key) is missing.

        Raises:
            ConfigurationError: If the link chain is longer than
                settings.i18n.MAX_ALIAS_HOPS (e.g., a cycle).
        """
        translations = self.get_domain_translations(domain)
        translation = translations.get(key)

        max_hops = self.settings.i18n.MAX_ALIAS_HOPS
        hops = 0
        while resolve_links and translation and translation.startswith(ALIAS_MARKER):
            hops += 1
            if hops > max_hops:
                logger.error(
                    "alias_chain_overflow",
                    locale=self.locale,
                    domain=domain,
                    key=key,
                    max_hops=max_hops,
                )
                raise ConfigurationError(
                    f'Alias chain of "{key}" in domain "{domain}" exceeds '
                    f"{max_hops} links"
                )
            translation = translations.get(translation[len(ALIAS_MARKER):])
        return translation

    def has_translation(self, key: str, domain: str = GLOBAL_DOMAIN) -> bool:
        return key in self.get_domain_translations(domain)

    def translate(
        self,
        key: str,
        domain: Union[str, Parameters, list, tuple, dict, None] = GLOBAL_DOMAIN,
        parameters: Any = None,
        nullable: bool = False,
    ) -> Optional[str]:
        """Translate a key, substituting parameters.

        Args:
            key: Translation key.
            domain: Domain of the key. Parameters given here are used as
                parameters of the global domain; None means global.
            parameters: A Parameters variant, or loose data interpreted by
                Parameters.from_raw(). Positional parameters disable alias
                following.
            nullable: Return None instead of the key when it is missing.

        Returns:
            Translation with parameters applied, the key itself when it has
            no translation, or None in nullable mode.
        """
        if domain is None:
            domain = GLOBAL_DOMAIN
        elif not isinstance(domain, str):
            parameters = domain
            domain = GLOBAL_DOMAIN

        params = Parameters.from_raw(parameters)
        resolve_links = params is None or params.resolves_links
        translation = self.get_translation(key, domain, resolve_links=resolve_links)

        if not translation:
            if nullable:
                return None
            translation = key

        if params is not None:
            translation = params.apply(translation)
        return translation

    def translate_or_default(
        self, key: str, default: str, domain: str = GLOBAL_DOMAIN
    ) -> str:
        """Translate a key, or return default when the domain lacks it."""
        if self.has_translation(key, domain):
            return self.translate(key, domain)
        return default

    # Locale information and formatting

    def get_http_locale(self) -> str:
        """Locale as per RFC 4646 (e.g., "en-US")."""
        return to_http_locale(self.locale)

    def get_main_locale(self) -> str:
        return main_locale(self.locale)

    def info(self, key: str) -> str:
        """Get a locale convention (e.g., "decimal_point").

        A translation of the key in the global domain overrides the OS
        locale conventions.

        Raises:
            ConfigurationError: If neither source knows the key.
        """
        value = self.get_translation(key, GLOBAL_DOMAIN)
        if value:
            return value

        conventions = localeconv()
        if key not in conventions:
            logger.error("unknown_locale_convention", locale=self.locale, key=key)
            raise ConfigurationError(f'Invalid key "{key}" for locale conventions')

        convention = conventions[key]
        return convention if isinstance(convention, str) else str(convention)

    def get_currency_formatter(self) -> CurrencyFormatter:
        """Get the currency formatter of this locale, created on first use.

        Raises:
            CapabilityUnavailable: If Babel is not installed.
        """
        if self._currency_formatter is None:
            self._currency_formatter = CurrencyFormatter(self.locale)
        return self._currency_formatter

    def format_currency(
        self, value: Number, currency: str, decimals: Union[bool, int] = True
    ) -> str:
        """Format an amount in a currency.

        Args:
            value: Amount.
            currency: ISO 4217 currency code.
            decimals: Minimum fraction digits; True means 2 and False means 0.
        """
        if decimals is True:
            decimals = 2
        elif decimals is False:
            decimals = 0
        return self.get_currency_formatter().format(
            value, currency, min_fraction_digits=decimals
        )

    def format_number(self, value: Number, decimals: int = 0) -> str:
        return formatting.format_number(
            value, decimals, self.info("decimal_point"), self.info("thousands_sep")
        )

    def parse_number(self, value: str) -> float:
        """Parse a number formatted with this locale's separators (0.0 if malformed)."""
        return formatting.parse_number(
            value, self.info("decimal_point"), self.info("thousands_sep")
        )
