"""Locale-aware number and currency formatting.

Currency formatting relies on Babel's CLDR data. Plain number formatting
and parsing only need the decimal point and thousands separator strings,
which the translation service resolves itself.
"""

import copy
import importlib.util
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from infrastructure.i18n.exceptions import CapabilityUnavailable, ConfigurationError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Number = Union[int, float, Decimal]

# Leading numeric part of a string, as loose float parsing reads it
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def supports_number_formatting() -> bool:
    """Check whether Babel is installed. Never raises."""
    return importlib.util.find_spec("babel") is not None


def require_number_formatting() -> None:
    """Ensure locale-aware number formatting is available.

    Raises:
        CapabilityUnavailable: If Babel is not installed.
    """
    if not supports_number_formatting():
        logger.error("number_formatting_unavailable", package="babel")
        raise CapabilityUnavailable(
            'Package "babel" is required for currency formatting'
        )


class CurrencyFormatter:
    """Currency formatter bound to one locale.

    Uses the locale's standard currency pattern; the minimum number of
    fraction digits can be raised or lowered per call.

    Attributes:
        locale: Babel locale the formatter renders for.
        pattern: Standard currency pattern of the locale.
    """

    def __init__(self, locale: str):
        """Create a formatter for a locale code (e.g., "fr_FR").

        Raises:
            CapabilityUnavailable: If Babel is not installed.
            ConfigurationError: If Babel does not know the locale.
        """
        require_number_formatting()

        from babel import Locale, UnknownLocaleError

        try:
            self.locale = Locale.parse(locale)
        except (UnknownLocaleError, ValueError) as e:
            logger.error("unknown_formatting_locale", locale=locale, error=str(e))
            raise ConfigurationError(
                f'Locale "{locale}" is unknown to the number formatter'
            ) from e

        self.pattern = self.locale.currency_formats["standard"]

    def format(self, value: Number, currency: str, min_fraction_digits: int) -> str:
        """Format an amount in a currency.

        Args:
            value: Amount to format.
            currency: ISO 4217 currency code (e.g., "EUR").
            min_fraction_digits: Minimum number of fraction digits shown.

        Returns:
            Localized currency string (e.g., "1 234,50 €").
        """
        pattern = copy.copy(self.pattern)
        max_fraction_digits = max(min_fraction_digits, self.pattern.frac_prec[1])
        pattern.frac_prec = (min_fraction_digits, max_fraction_digits)
        return pattern.apply(value, self.locale, currency=currency, currency_digits=False)


def format_number(
    value: Number, decimals: int, decimal_point: str, thousands_sep: str
) -> str:
    """Format a number with fixed decimals and grouped thousands.

    Rounds half away from zero. ``format_number(1234.5, 2, ",", " ")`` gives
    ``"1 234,50"``. Non-finite values render as ``"nan"``, ``"inf"`` and
    ``"-inf"``.
    """
    decimals = max(decimals, 0)
    number = Decimal(str(value))
    if number.is_nan():
        return "nan"
    if number.is_infinite():
        return "-inf" if number < 0 else "inf"

    # Enough precision for every integer digit plus the requested decimals
    with localcontext() as ctx:
        ctx.prec = max(number.adjusted(), 0) + decimals + 2
        rounded = number.quantize(
            Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
        )
        sign = "-" if rounded < 0 else ""
        integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    formatted = sign + thousands_sep.join(groups)
    if decimals > 0:
        formatted += decimal_point + fraction_part
    return formatted


def parse_number(value: str, decimal_point: str, thousands_sep: str) -> float:
    """Parse a localized number string.

    Thousands separators are removed, then the decimal point is normalized
    to ".". The leading numeric part is parsed; a string without one gives 0.0.
    """
    if thousands_sep:
        value = value.replace(thousands_sep, "")
    if decimal_point and decimal_point != ".":
        value = value.replace(decimal_point, ".")

    match = _LEADING_FLOAT.match(value)
    if match is None:
        return 0.0
    return float(match.group())
