"""Translation table parsed from a quoted, comma-delimited source.

Each column is a language and each row is one translatable text. Rows carry
no key: a text is found by scanning the source language column for an exact
match, and the same position in the target column is its translation.

Source format:

    en-US,fr-FR
    "Hello, world",Bonjour le monde
    Quit,Quitter
"""

import re
from typing import Dict, List, Mapping, Sequence, Tuple

from infrastructure.i18n.exceptions import (
    InvalidInputError,
    NoSuchEntryError,
    UnknownLanguageError,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# A quoted field (group 1) or a bare field (group 2), followed by its separator.
FIELD_PATTERN = re.compile(r'(?:"([^"\n]*)"|([^,"\n]*))\s*(?:,\s*|\n|$)')
WHITESPACE_PATTERN = re.compile(r"\s*")


def split_fields(line: str) -> List[str]:
    """Tokenize one data row into its field values, in order.

    Commas inside a quoted field do not split it. The trailing empty match
    at end of line is included; callers take only as many fields as there
    are languages.
    """
    fields = []
    for match in FIELD_PATTERN.finditer(line):
        quoted, bare = match.group(1), match.group(2)
        fields.append(quoted if quoted is not None else (bare or ""))
    return fields


class TranslationTable:
    """Aligned per-language columns of translated texts.

    Item ``i`` of every column is a translation of item ``i`` of every other
    column. The table is read-only once built.

    Attributes:
        languages: Language codes in header order.
        row_count: Number of translation rows.
    """

    def __init__(self, columns: Mapping[str, Sequence[str]]):
        """Build a table from a ``{language: [texts]}`` mapping.

        Args:
            columns: Texts per language; every column must have the same length.

        Raises:
            InvalidInputError: If the columns are not all the same length.
        """
        lengths = {len(texts) for texts in columns.values()}
        if len(lengths) > 1:
            raise InvalidInputError(
                f"All language columns must have the same length, got {sorted(lengths)}"
            )
        self._columns: Dict[str, Tuple[str, ...]] = {
            language: tuple(texts) for language, texts in columns.items()
        }
        self._row_count = lengths.pop() if lengths else 0

    @classmethod
    def parse(cls, text: str) -> "TranslationTable":
        """Parse the contents of a translation source.

        The first line holds the language codes, unquoted; all whitespace in
        it is ignored. A language listed twice is kept once, and the value of
        its last column wins. Rows with fewer fields than languages are padded
        with empty strings. Every line after the header is a row, blank ones
        included; only the empty remainder after a final newline is dropped.

        Args:
            text: Raw source text, rows separated by ``\\n``.

        Returns:
            TranslationTable built from the text.

        Raises:
            InvalidInputError: If the text is missing or empty.
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("Source text cannot be empty")

        lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
        header = WHITESPACE_PATTERN.sub("", lines[0]).split(",")

        columns: Dict[str, List[str]] = {language: [] for language in header}
        rows = lines[1:]
        if rows and rows[-1] == "":
            rows = rows[:-1]

        row_count = 0
        for line in rows:
            fields = split_fields(line)
            row = {}
            for index, language in enumerate(header):
                row[language] = fields[index] if index < len(fields) else ""
            for language, value in row.items():
                columns[language].append(value)
            row_count += 1

        if len(columns) < len(header):
            logger.warning(
                "duplicate_languages_in_header",
                header=header,
                languages=list(columns),
            )

        logger.debug(
            "translation_table_parsed",
            languages=list(columns),
            row_count=row_count,
        )
        return cls(columns)

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    @property
    def row_count(self) -> int:
        return self._row_count

    def has_language(self, language: str) -> bool:
        return language in self._columns

    def get_available_languages(self) -> List[str]:
        """Get the language codes in the order they appear in the header.

        Returns:
            A new list on every call.
        """
        return list(self._columns)

    def get_column(self, language: str) -> Tuple[str, ...]:
        """Get every text of one language, in row order.

        Raises:
            UnknownLanguageError: If the language is not in the table.
        """
        if language not in self._columns:
            raise UnknownLanguageError(language)
        return self._columns[language]

    def get_row(self, index: int) -> Dict[str, str]:
        """Get one translation row as ``{language: text}``.

        Raises:
            IndexError: If the row does not exist.
        """
        if not 0 <= index < self._row_count:
            raise IndexError(f"Row {index} out of range (row_count={self._row_count})")
        return {language: texts[index] for language, texts in self._columns.items()}

    def translate(self, text: str, from_language: str, to_language: str) -> str:
        """Translate a text from one language to another.

        Finds the first row whose ``from_language`` value equals ``text``
        exactly and returns that row's ``to_language`` value, which may be
        an empty string.

        Args:
            text: The text as currently displayed.
            from_language: Language ``text`` is written in.
            to_language: Language to translate to.

        Returns:
            The translated text.

        Raises:
            UnknownLanguageError: If either language is not in the table.
            NoSuchEntryError: If no row matches ``text``.
        """
        source = self.get_column(from_language)
        target = self.get_column(to_language)

        try:
            index = source.index(text)
        except ValueError:
            raise NoSuchEntryError(text, from_language) from None
        return target[index]

    def serialize(self, quote: bool = False) -> str:
        """Render the table back into the source format.

        By default values are written as-is, so a value containing a comma
        is split into two fields when read back, and leading whitespace of any
        column but the first is lost. With ``quote=True`` values containing a
        comma or starting with whitespace are wrapped in double quotes. Values
        containing a double quote or a newline cannot be represented either
        way.

        Args:
            quote: Quote values that contain a comma or start with whitespace.

        Returns:
            Header line followed by one newline-terminated line per row.
        """
        languages = self.get_available_languages()
        if not languages:
            return ""

        lines = [",".join(languages)]
        for index in range(self._row_count):
            values = (self._columns[language][index] for language in languages)
            if quote:
                values = (
                    f'"{value}"' if "," in value or value[:1].isspace() else value
                    for value in values
                )
            lines.append(",".join(values))
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return self._row_count

    def __repr__(self) -> str:
        return f"TranslationTable(languages={list(self._columns)!r}, row_count={self._row_count})"
