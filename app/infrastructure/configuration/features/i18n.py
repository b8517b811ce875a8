"""Translation feature settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import FeatureSettings

# .../app/infrastructure/configuration/features/i18n.py -> .../app/locales
DEFAULT_LANG_FOLDER = Path(__file__).resolve().parents[3] / "locales"


class I18nSettings(FeatureSettings):
    """Translation lookup configuration.

    Environment Variables:
        I18N_LANG_FOLDER: Root folder holding one sub-folder per locale
            (default: app/locales)
        I18N_DEFAULT_LOCALE: Locale of the active service when none was set
            (default: en_US)
        I18N_MAX_ALIAS_HOPS: Maximum number of alias links followed before the
            chain is considered broken (default: 32)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        lang_folder = settings.i18n.LANG_FOLDER
        locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    model_config = SettingsConfigDict(env_prefix="I18N_")

    LANG_FOLDER: Path = Field(
        default=DEFAULT_LANG_FOLDER,
        description="Root folder of the <locale>/<domain>.<ext> translation tree",
    )

    DEFAULT_LOCALE: str = Field(
        default="en_US",
        description="Locale used for the active translation service",
    )

    MAX_ALIAS_HOPS: int = Field(
        default=32,
        ge=1,
        description="Maximum alias links followed for one lookup",
    )
