"""Custom exceptions for the translation system.

Provides specialized exceptions for deployment misconfiguration,
malformed translation files, and missing host capabilities.
"""

from pathlib import Path
from typing import Optional, Union


class I18nError(Exception):
    """Base exception for all translation-related errors.

    Example:
        try:
            service.format_currency(12.5, "EUR")
        except I18nError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when the translation setup of the deployment is invalid.

    Covers a missing language root or locale folder, a locale-convention
    key known neither by the translations nor by the OS, and alias chains
    that never reach a literal value.

    Example:
        >>> provider.get_locale_domains("xx_XX")
        Traceback (most recent call last):
        ...
        ConfigurationError: Locale folder "locales/xx_XX" not found
    """

    pass


class ParseError(I18nError):
    """Raised when a translation file cannot be parsed by its provider.

    Attributes:
        path: File that failed to parse.

    Example:
        >>> provider.parse_file(Path("locales/en_US/global.yaml"))
        Traceback (most recent call last):
        ...
        ParseError: Failed to parse locales/en_US/global.yaml: ...
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class CapabilityUnavailable(I18nError):
    """Raised when a formatting capability is not installed on the host.

    Example:
        >>> service.format_currency(12.5, "EUR")
        Traceback (most recent call last):
        ...
        CapabilityUnavailable: Package "babel" is required for currency formatting
    """

    pass
