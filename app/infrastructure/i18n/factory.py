"""Factory functions for creating localization components.

Provides convenience functions for building the translation table and the
coordinator from the application settings.
"""

from pathlib import Path

from infrastructure.configuration import settings
from infrastructure.i18n.coordinator import LocalizationCoordinator
from infrastructure.i18n.loader import FileTranslationLoader
from infrastructure.i18n.slots import SlotProvider
from infrastructure.i18n.table import TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _resolve_source_path(source_path: Path | None) -> Path:
    """Return source_path, or the configured LOCALIZATION_SOURCE."""
    if source_path is not None:
        return Path(source_path)
    if not settings.localization.LOCALIZATION_SOURCE:
        raise ValueError(
            "No translation source given and LOCALIZATION_SOURCE is not set"
        )
    return Path(settings.localization.LOCALIZATION_SOURCE)


def create_translation_table(source_path: Path | None = None) -> TranslationTable:
    """Load the translation table.

    Args:
        source_path: Path to the source file
            (default: settings.localization.LOCALIZATION_SOURCE)

    Returns:
        TranslationTable: Parsed translation table

    Raises:
        ValueError: If no source is configured or the file does not exist
        InvalidInputError: If the source file is empty

    Usage:
        # Use the configured source
        table = create_translation_table()

        # Explicit source
        table = create_translation_table(Path("locales/ui.csv"))
    """
    localization = settings.localization
    loader = FileTranslationLoader(
        _resolve_source_path(source_path),
        encoding=localization.LOCALIZATION_ENCODING,
    )
    return loader.load()


def create_coordinator(
    slot_provider: SlotProvider,
    table: TranslationTable | None = None,
    default_language: str | None = None,
) -> LocalizationCoordinator:
    """Create and configure a LocalizationCoordinator.

    Args:
        slot_provider: Provider of the host's localizable slots
        table: Translation table (default: create_translation_table())
        default_language: Initial language
            (default: settings.localization.LOCALIZATION_DEFAULT_LANGUAGE)

    Returns:
        LocalizationCoordinator: Configured coordinator

    Usage:
        registry = SlotRegistry()
        coordinator = create_coordinator(registry)
    """
    if table is None:
        table = create_translation_table()
    if default_language is None:
        default_language = settings.localization.LOCALIZATION_DEFAULT_LANGUAGE

    coordinator = LocalizationCoordinator(table, default_language, slot_provider)
    logger.info(
        "coordinator_created",
        default_language=default_language,
        row_count=table.row_count,
    )
    return coordinator


def save_translation_table(
    table: TranslationTable,
    source_path: Path | None = None,
) -> Path:
    """Write a table back to its source file.

    Values containing commas or starting with whitespace are quoted when
    settings.localization.LOCALIZATION_QUOTE_ON_SAVE is enabled.

    Args:
        table: Table to write
        source_path: Destination (default: settings.localization.LOCALIZATION_SOURCE)

    Returns:
        Path the table was written to

    Raises:
        ValueError: If no destination is configured
    """
    localization = settings.localization
    source_path = _resolve_source_path(source_path)
    source_path.write_text(
        table.serialize(quote=localization.LOCALIZATION_QUOTE_ON_SAVE),
        encoding=localization.LOCALIZATION_ENCODING,
    )
    logger.info(
        "saved_translation_table",
        source_path=str(source_path),
        quoted=localization.LOCALIZATION_QUOTE_ON_SAVE,
    )
    return source_path
