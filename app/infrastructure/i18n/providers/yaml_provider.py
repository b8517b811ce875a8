"""YAML translation provider (arbitrarily nested files)."""

import importlib.util
from pathlib import Path
from typing import Any, Dict

import yaml

from infrastructure.i18n.exceptions import ParseError
from infrastructure.i18n.providers.base import TranslationProvider
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class YAMLTranslationProvider(TranslationProvider):
    """Provider for ``<domain>.yaml`` files.

    Expected format:
        title: Welcome
        user:
          greeting: "Hello #name#"
          farewell: "%goodbye"
    """

    name = "yaml"

    def is_supported(self) -> bool:
        return importlib.util.find_spec("yaml") is not None

    def resolve_domain_file(self, domain: str) -> str:
        return f"{domain}.yaml"

    def parse_file(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ParseError(f"Failed to parse {path}: {e}", path=path) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(path), expected="dict")
            raise ParseError(
                f"Failed to parse {path}: expected a mapping, got {type(data).__name__}",
                path=path,
            )

        return data
