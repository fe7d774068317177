"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Translation source text
- TranslationTable
- Localizable slots and slot providers
"""

from typing import Optional, Sequence

from infrastructure.i18n import (
    AttributeSlot,
    LocalizationCoordinator,
    SlotRegistry,
    TranslationTable,
)

DEFAULT_ROWS = [
    ["Hello", "Bonjour", "Hola"],
    ["Goodbye", "Au revoir", "Adiós"],
    ["Quit", "Quitter", "Salir"],
]


def make_source_text(
    languages: Sequence[str] = ("en-US", "fr-FR", "es-ES"),
    rows: Optional[Sequence[Sequence[str]]] = None,
) -> str:
    """Create translation source text.

    Values are written as-is; callers quote them when needed.

    Args:
        languages: Header language codes.
        rows: Field values per row (default: DEFAULT_ROWS).

    Returns:
        Source text with a trailing newline.
    """
    if rows is None:
        rows = DEFAULT_ROWS
    lines = [",".join(languages)] + [",".join(row) for row in rows]
    return "\n".join(lines) + "\n"


def make_translation_table(
    languages: Sequence[str] = ("en-US", "fr-FR", "es-ES"),
    rows: Optional[Sequence[Sequence[str]]] = None,
) -> TranslationTable:
    """Create a TranslationTable directly from columns.

    Args:
        languages: Language codes.
        rows: Values per row, one per language (default: DEFAULT_ROWS).

    Returns:
        TranslationTable instance.
    """
    if rows is None:
        rows = DEFAULT_ROWS
    columns = {
        language: [row[index] for row in rows]
        for index, language in enumerate(languages)
    }
    return TranslationTable(columns)


class Label:
    """Minimal stand-in for a UI text element."""

    def __init__(self, text):
        self.text = text


def make_labels(*texts) -> list:
    """Create one Label per text."""
    return [Label(text) for text in texts]


def make_slot_registry(labels: Sequence[Label]) -> SlotRegistry:
    """Create a SlotRegistry with one AttributeSlot per label's ``text``."""
    return SlotRegistry([AttributeSlot(label, "text") for label in labels])


def make_coordinator(
    labels: Sequence[Label] = (),
    table: Optional[TranslationTable] = None,
    default_language: str = "en-US",
) -> LocalizationCoordinator:
    """Create a LocalizationCoordinator over the given labels.

    Args:
        labels: Labels exposed through a SlotRegistry.
        table: Translation table (default: make_translation_table()).
        default_language: Initial language.

    Returns:
        LocalizationCoordinator instance.
    """
    if table is None:
        table = make_translation_table()
    return LocalizationCoordinator(
        table,
        default_language,
        make_slot_registry(labels),
    )
