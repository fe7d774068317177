"""Translation table loading interface and implementations.

Defines the contract for obtaining a TranslationTable and provides
text- and file-based loaders.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from infrastructure.i18n.table import TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation table loaders."""

    @abstractmethod
    def load(self) -> TranslationTable:
        """Load and parse the translation table.

        Returns:
            TranslationTable built from the source.

        Raises:
            InvalidInputError: If the source is empty.
        """
        pass


class TextTranslationLoader(TranslationLoader):
    """Loader for a translation source already held in memory.

    Attributes:
        text: Raw source text.
    """

    def __init__(self, text: str):
        self.text = text

    def load(self) -> TranslationTable:
        return TranslationTable.parse(self.text)


class FileTranslationLoader(TranslationLoader):
    """Loader for a translation source stored in a file.

    Attributes:
        source_path: Path to the comma-delimited source file.
        encoding: Text encoding of the file.
    """

    def __init__(self, source_path: Path, encoding: str = "utf-8"):
        """Initialize file translation loader.

        Args:
            source_path: Path to the source file.
            encoding: Text encoding of the file.

        Raises:
            ValueError: If the file does not exist.
        """
        self.source_path = Path(source_path)
        self.encoding = encoding

        if not self.source_path.is_file():
            raise ValueError(f"Translation source not found: {self.source_path}")

    def load(self) -> TranslationTable:
        """Read and parse the source file."""
        text = self.source_path.read_text(encoding=self.encoding)
        table = TranslationTable.parse(text)
        logger.info(
            "loaded_translation_table",
            source_path=str(self.source_path),
            languages=table.get_available_languages(),
            row_count=table.row_count,
        )
        return table
