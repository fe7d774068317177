"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization feature settings class

Example:
    ```python
    from infrastructure.configuration import settings

    default_language = settings.localization.LOCALIZATION_DEFAULT_LANGUAGE

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.features import LocalizationSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
