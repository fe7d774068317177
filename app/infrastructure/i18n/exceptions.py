"""Custom exceptions for the localization system.

Provides specialized exceptions for translation table construction
and value-based translation lookups.
"""

from typing import Optional


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            table.translate(text, "en-US", "fr-FR")
        except LocalizationError as e:
            logger.warning("translation_failed", error=str(e))
    """

    pass


class InvalidInputError(LocalizationError, ValueError):
    """Raised when a translation table cannot be built from its source.

    Example:
        >>> TranslationTable.parse("")
        Traceback (most recent call last):
        ...
        InvalidInputError: Source text cannot be empty
    """

    pass


class UnknownLanguageError(LocalizationError, LookupError):
    """Raised when a language is not one of the table's columns.

    Example:
        >>> table.translate("Hello", "xx-XX", "fr-FR")
        Traceback (most recent call last):
        ...
        UnknownLanguageError: Language xx-XX is not found in the data
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language {language} is not found in the data")


class NoSuchEntryError(LocalizationError, LookupError):
    """Raised when no row holds the queried text in the source language."""

    def __init__(self, text: str, language: Optional[str] = None):
        self.text = text
        self.language = language
        super().__init__(
            f"No entry was found in {language} matching text {text!r}"
        )
