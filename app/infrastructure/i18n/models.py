"""Translation models for i18n system.

Defines locale helpers, the parameter variants accepted by
``TranslationService.translate`` and the translation tree utilities used
when a domain is built.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# printf-style conversion specifiers and "%%" escapes
_PRINTF_SPEC = re.compile(
    r"%%|%(?:\([^)]*\))?[-#0 +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[diouxXeEfFgGcrsa]"
)

ALIAS_MARKER = "%"


def main_locale(locale: str) -> str:
    """Get the main component of a locale (e.g., "en" from "en_US").

    Args:
        locale: Locale code.

    Returns:
        Language part of the locale, or the locale itself without region.
    """
    return locale.split("_", 1)[0]


def to_http_locale(locale: str) -> str:
    """Convert a locale code to its RFC 4646 form ("en_US" -> "en-US")."""
    return locale.replace("_", "-")


def format_associated_locales(locales: Iterable[str]) -> Dict[str, str]:
    """Map each locale and its main component to a concrete locale.

    "en_US" gives {"en_US": "en_US", "en": "en_US"}; the main component
    keeps the first locale that introduced it.

    Args:
        locales: Locale codes in preference order.

    Returns:
        Ordered mapping of requested code to available locale.
    """
    associated: Dict[str, str] = {}
    for locale in locales:
        associated[locale] = locale
        if len(locale) >= 5:
            associated.setdefault(main_locale(locale), locale)
    return associated


class ParameterMode(str, Enum):
    """Substitution strategies of translation parameters."""

    POSITIONAL = "positional"
    NAMED = "named"
    KEY_VALUE = "key_value"


def is_string_convertible(value: Any) -> bool:
    """Check whether a parameter value has a meaningful string form.

    Scalars qualify, as do objects defining their own ``__str__``.
    Containers and None do not.
    """
    if isinstance(value, (str, int, float, bool, Decimal)):
        return True
    if value is None or isinstance(value, (list, tuple, dict, set)):
        return False
    return type(value).__str__ is not object.__str__


class Parameters(ABC):
    """Base of the parameter variants applied to a translation."""

    mode: ParameterMode

    @property
    def resolves_links(self) -> bool:
        """Whether the translation is looked up with alias following."""
        return True

    @abstractmethod
    def apply(self, translation: str) -> str:
        """Substitute the parameters into a translation."""
        pass

    @staticmethod
    def from_raw(raw: Any) -> Optional["Parameters"]:
        """Interpret loosely shaped parameters.

        - a Parameters instance is returned as is
        - a mapping gives NamedParameters
        - a list/tuple whose first item is a list/tuple gives
          KeyValueParameters (``[keys, values]``)
        - any other list/tuple gives PositionalParameters
        - a single scalar gives PositionalParameters with one value

        Args:
            raw: Parameters as received from a caller.

        Returns:
            Matching Parameters variant, or None when there is nothing to apply.
        """
        if raw is None:
            return None
        if isinstance(raw, Parameters):
            return raw
        if isinstance(raw, Mapping):
            return NamedParameters(dict(raw)) if raw else None
        if isinstance(raw, (list, tuple)):
            if not raw:
                return None
            if isinstance(raw[0], (list, tuple)):
                values = raw[1] if len(raw) > 1 else None
                return KeyValueParameters.from_pair(raw[0], values)
            return PositionalParameters(list(raw))
        return PositionalParameters([raw])


@dataclass(frozen=True)
class PositionalParameters(Parameters):
    """printf-style values, e.g. ``"Hi %s, you have %d"`` with ``["Bob", 3]``.

    Translations are looked up without alias following, since a literal
    value starting with "%" is a format string here, not a link.
    """

    values: Sequence[Any] = field(default_factory=list)
    mode = ParameterMode.POSITIONAL

    @property
    def resolves_links(self) -> bool:
        return False

    def apply(self, translation: str) -> str:
        # Extra values are ignored like printf does
        expected = sum(
            1 for m in _PRINTF_SPEC.finditer(translation) if m.group() != "%%"
        )
        values = tuple(self.values)[:expected]
        try:
            return translation % values
        except (TypeError, ValueError) as e:
            logger.warning(
                "positional_substitution_failed",
                translation=translation,
                value_count=len(self.values),
                error=str(e),
            )
            return translation


@dataclass(frozen=True)
class NamedParameters(Parameters):
    """Named values replacing ``#name#`` tokens.

    Values without a meaningful string form are skipped and their token
    stays in the translation.
    """

    values: Dict[str, Any] = field(default_factory=dict)
    mode = ParameterMode.NAMED

    def apply(self, translation: str) -> str:
        for name, value in self.values.items():
            if not is_string_convertible(value):
                continue
            translation = translation.replace(f"#{name}#", str(value))
        return translation


@dataclass(frozen=True)
class KeyValueParameters(Parameters):
    """Literal search/replace pairs given as two parallel lists.

    A key without a matching value is replaced by the empty string.
    ``[keys, "text"]`` replaces every key by the same text.
    """

    keys: List[Any] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)
    mode = ParameterMode.KEY_VALUE

    @classmethod
    def from_pair(cls, keys: Sequence[Any], values: Any) -> "KeyValueParameters":
        """Build from a keys list and a values list or a single replacement.

        A single (non-list) replacement applies to every key.
        """
        keys = list(keys)
        if values is None:
            return cls(keys, [])
        if isinstance(values, (list, tuple)):
            return cls(keys, list(values))
        return cls(keys, [values] * len(keys))

    def apply(self, translation: str) -> str:
        for index, search in enumerate(self.keys):
            replace = self.values[index] if index < len(self.values) else ""
            translation = translation.replace(str(search), str(replace))
        return translation


def merge_translation_trees(trees: Iterable[Mapping]) -> Dict[str, str]:
    """Flatten raw provider trees and merge them, the first tree defining a key wins.

    Keys are compared once flattened, so a nested ``{"menu": {"open": ...}}``
    collides with a flat ``menu.open`` and a numeric ``404`` with ``"404"``.

    Args:
        trees: Raw trees in provider registry order.

    Returns:
        Merged flat mapping of key path to string value.
    """
    merged: Dict[str, str] = {}
    for tree in trees:
        for key, value in flatten_translations(tree).items():
            merged.setdefault(key, value)
    return merged


def _leaf_to_string(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def flatten_translations(tree: Mapping, path: str = "") -> Dict[str, str]:
    """Flatten a nested translation tree into dot-joined keys.

    ``{"a": {"b": "v"}}`` gives ``{"a.b": "v"}``. Lists are flattened with
    their index as key part.

    Args:
        tree: Raw (possibly nested) translation tree.
        path: Key prefix of the tree being flattened.

    Returns:
        Flat mapping of key path to string value.
    """
    flattened: Dict[str, str] = {}
    for key, value in tree.items():
        key_path = f"{path}{key}"
        if isinstance(value, Mapping):
            flattened.update(flatten_translations(value, f"{key_path}."))
        elif isinstance(value, list):
            flattened.update(
                flatten_translations(dict(enumerate(value)), f"{key_path}.")
            )
        else:
            flattened[key_path] = _leaf_to_string(value)
    return flattened
