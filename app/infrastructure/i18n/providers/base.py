"""Translation provider interface.

A provider encapsulates one translation file format. All providers share
the ``<lang_folder>/<locale>/<domain>.<ext>`` layout; a format only decides
the domain file name, how the file is parsed and whether the runtime can
parse it at all.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from infrastructure.i18n.exceptions import ConfigurationError
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()


class TranslationProvider(ABC):
    """Abstract base for translation file providers.

    Attributes:
        name: Short identifier of the format (e.g., "yaml").
    """

    name: str = ""

    def __init__(self, lang_folder: Optional[Path] = None):
        """Initialize provider.

        Args:
            lang_folder: Root folder holding one sub-folder per locale.
                Defaults to settings.i18n.LANG_FOLDER, read on each access.
        """
        self._lang_folder = Path(lang_folder) if lang_folder is not None else None

    @property
    def lang_folder(self) -> Path:
        if self._lang_folder is not None:
            return self._lang_folder
        return Path(get_settings().i18n.LANG_FOLDER)

    @abstractmethod
    def is_supported(self) -> bool:
        """Check whether the runtime can parse this format. Never raises."""
        pass

    @abstractmethod
    def resolve_domain_file(self, domain: str) -> str:
        """Get the file name holding a domain (e.g., "global.yaml")."""
        pass

    @abstractmethod
    def parse_file(self, path: Path) -> Dict[str, Any]:
        """Parse a translation file into a (possibly nested) mapping.

        Raises:
            ParseError: If the file content is malformed.
        """
        pass

    def get_locales(self) -> List[str]:
        """List candidate locales, one per sub-folder of the language folder.

        Raises:
            ConfigurationError: If the language folder does not exist.
        """
        root = self.lang_folder
        if not root.is_dir():
            logger.error("lang_folder_not_found", provider=self.name, path=str(root))
            raise ConfigurationError(f'Language folder "{root}" not found')

        return sorted(
            entry.name
            for entry in root.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )

    def get_locale_path(self, locale: str) -> Path:
        """Get the folder of a locale.

        Raises:
            ConfigurationError: If the locale folder does not exist.
        """
        path = self.lang_folder / locale
        if not path.is_dir():
            logger.error("locale_folder_not_found", provider=self.name, path=str(path))
            raise ConfigurationError(f'Locale folder "{path}" not found')
        return path

    def get_locale_domains(self, locale: str) -> List[str]:
        """List the domains of a locale handled by this provider.

        A file counts only if its name is what resolve_domain_file() gives
        for its own stem, so files of other formats are ignored.
        """
        domains = []
        for entry in sorted(self.get_locale_path(locale).iterdir()):
            if not entry.is_file():
                continue
            domain = entry.stem
            if entry.name == self.resolve_domain_file(domain):
                domains.append(domain)
        return domains

    def get_domain_translations(self, locale: str, domain: str) -> Dict[str, Any]:
        """Get the raw translations of a domain.

        Returns:
            Parsed tree, or an empty mapping when this provider has no file
            for the domain.
        """
        path = self.get_locale_path(locale) / self.resolve_domain_file(domain)
        if not path.is_file():
            return {}

        translations = self.parse_file(path)
        logger.debug(
            "provider_domain_parsed",
            provider=self.name,
            locale=locale,
            domain=domain,
            key_count=len(translations),
        )
        return translations

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lang_folder={str(self.lang_folder)!r})"
