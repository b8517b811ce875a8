"""INI translation provider (flat ``key = value`` files)."""

import configparser
import importlib.util
from pathlib import Path
from typing import Dict

from infrastructure.i18n.exceptions import ParseError
from infrastructure.i18n.providers.base import TranslationProvider
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Holds the keys written before any section header
_ROOT_SECTION = "__root__"
_NO_DEFAULTS = "\x00defaults"


class IniTranslationProvider(TranslationProvider):
    """Provider for ``<domain>.ini`` files.

    Sections are ignored: the keys of every section end up in one flat
    mapping, a later key overriding an earlier one. Values are taken raw
    (a leading "%" marks an alias, not an interpolation) and surrounding
    double quotes are stripped. A " ;" after a value starts a comment;
    a ";" not preceded by whitespace is part of the value.

    An indented line continues the previous value instead of starting a
    new key, and bare true/false/null tokens are kept as written.
    """

    name = "ini"

    def is_supported(self) -> bool:
        return importlib.util.find_spec("configparser") is not None

    def resolve_domain_file(self, domain: str) -> str:
        return f"{domain}.ini"

    def parse_file(self, path: Path) -> Dict[str, str]:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            delimiters=("=",),
            comment_prefixes=(";", "#"),
            inline_comment_prefixes=(";",),
            default_section=_NO_DEFAULTS,
        )
        parser.optionxform = str

        try:
            content = Path(path).read_text(encoding="utf-8")
            parser.read_string(f"[{_ROOT_SECTION}]\n{content}", source=str(path))
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.error("ini_parse_error", file=str(path), error=str(e))
            raise ParseError(f"Failed to parse {path}: {e}", path=path) from e

        translations: Dict[str, str] = {}
        for section in parser.sections():
            for key, value in parser.items(section, raw=True):
                translations[key] = _unquote(value)
        return translations


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value
