"""Localization feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Translation table and language switching configuration.

    Environment Variables:
        LOCALIZATION_SOURCE: Path to the comma-delimited translation table
        LOCALIZATION_DEFAULT_LANGUAGE: Language the UI starts in (default: en-US)
        LOCALIZATION_ENCODING: Encoding of the source file (default: utf-8)
        LOCALIZATION_QUOTE_ON_SAVE: Quote values containing commas when the
            table is written back (default: False)

    Example:
        ```python
        from infrastructure.configuration import settings

        source = settings.localization.LOCALIZATION_SOURCE
        default_language = settings.localization.LOCALIZATION_DEFAULT_LANGUAGE
        ```
    """

    LOCALIZATION_SOURCE: str | None = Field(default=None, alias="LOCALIZATION_SOURCE")
    LOCALIZATION_DEFAULT_LANGUAGE: str = Field(
        default="en-US", alias="LOCALIZATION_DEFAULT_LANGUAGE"
    )
    LOCALIZATION_ENCODING: str = Field(default="utf-8", alias="LOCALIZATION_ENCODING")
    LOCALIZATION_QUOTE_ON_SAVE: bool = Field(
        default=False,
        alias="LOCALIZATION_QUOTE_ON_SAVE",
        description="Quote values containing commas when serializing the table",
    )
