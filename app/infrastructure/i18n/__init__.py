"""i18n system - run-time localization from a translation table.

Loads a comma-delimited table of translated texts and switches the host's
visible texts from one language to another by value lookup.

Main components:
- table: TranslationTable (parse, translate, serialize)
- exceptions: LocalizationError and its subclasses
- models: SlotApplyFailure, LanguageSwitchReport
- slots: LocalizableSlot/SlotProvider protocols, AttributeSlot, CallbackSlot, SlotRegistry
- coordinator: LocalizationCoordinator holding the current language
- loader: TranslationLoader, TextTranslationLoader, FileTranslationLoader
- selector: LanguageSelector for dropdown-style widgets
- factory: create_translation_table, create_coordinator, save_translation_table
"""

from infrastructure.i18n.coordinator import LocalizationCoordinator
from infrastructure.i18n.exceptions import (
    InvalidInputError,
    LocalizationError,
    NoSuchEntryError,
    UnknownLanguageError,
)
from infrastructure.i18n.factory import (
    create_coordinator,
    create_translation_table,
    save_translation_table,
)
from infrastructure.i18n.loader import (
    FileTranslationLoader,
    TextTranslationLoader,
    TranslationLoader,
)
from infrastructure.i18n.models import LanguageSwitchReport, SlotApplyFailure
from infrastructure.i18n.selector import LanguageSelector
from infrastructure.i18n.slots import (
    AttributeSlot,
    CallbackSlot,
    LocalizableSlot,
    SlotProvider,
    SlotRegistry,
)
from infrastructure.i18n.table import TranslationTable

__all__ = [
    "TranslationTable",
    "LocalizationError",
    "InvalidInputError",
    "UnknownLanguageError",
    "NoSuchEntryError",
    "SlotApplyFailure",
    "LanguageSwitchReport",
    "LocalizableSlot",
    "SlotProvider",
    "AttributeSlot",
    "CallbackSlot",
    "SlotRegistry",
    "LocalizationCoordinator",
    "TranslationLoader",
    "TextTranslationLoader",
    "FileTranslationLoader",
    "LanguageSelector",
    "create_translation_table",
    "create_coordinator",
    "save_translation_table",
]
