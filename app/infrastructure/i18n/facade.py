"""Module-level translation helpers forwarding to the active service.

Example:
    from infrastructure.i18n.facade import translate, format_currency

    translate("welcome")
    translate("greeting", "users", {"name": "Ann"})
    format_currency(12.5, "EUR")
"""

from typing import Any, Optional, Union

from infrastructure.i18n.formatting import Number
from infrastructure.i18n.service import GLOBAL_DOMAIN, TranslationService


def translate(key: str, domain: Any = GLOBAL_DOMAIN, parameters: Any = None) -> str:
    """Translate a key with the active service, falling back to the key."""
    return TranslationService.get_active().translate(key, domain, parameters)


def translate_nullable(
    key: str, domain: Any = GLOBAL_DOMAIN, parameters: Any = None
) -> Optional[str]:
    """Translate a key with the active service, None when it is missing."""
    return TranslationService.get_active().translate(
        key, domain, parameters, nullable=True
    )


def translate_or_default(key: str, default: str, domain: str = GLOBAL_DOMAIN) -> str:
    return TranslationService.get_active().translate_or_default(key, default, domain)


def has_translation(key: str, domain: str = GLOBAL_DOMAIN) -> bool:
    return TranslationService.get_active().has_translation(key, domain)


def info(key: str) -> str:
    return TranslationService.get_active().info(key)


def parse_number(value: str) -> float:
    return TranslationService.get_active().parse_number(value)


def format_currency(
    value: Number, currency: str, decimals: Union[bool, int] = True
) -> str:
    return TranslationService.get_active().format_currency(value, currency, decimals)


def format_number(value: Number, decimals: int = 0) -> str:
    return TranslationService.get_active().format_number(value, decimals)
