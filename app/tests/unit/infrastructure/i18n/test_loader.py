"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    FileTranslationLoader,
    InvalidInputError,
    TextTranslationLoader,
    TranslationLoader,
)


class TestTextTranslationLoader:
    """Tests for TextTranslationLoader."""

    def test_load(self, source_text):
        """load() parses the in-memory text."""
        table = TextTranslationLoader(source_text).load()
        assert table.translate("Hello", "en-US", "es-ES") == "Hola"

    def test_load_empty_text(self):
        """load() raises InvalidInputError for empty text."""
        with pytest.raises(InvalidInputError):
            TextTranslationLoader("").load()

    def test_is_translation_loader(self):
        """TextTranslationLoader implements TranslationLoader."""
        assert isinstance(TextTranslationLoader("en"), TranslationLoader)


class TestFileTranslationLoader:
    """Tests for FileTranslationLoader."""

    def test_loader_initialization(self, source_file):
        """FileTranslationLoader stores path and encoding."""
        loader = FileTranslationLoader(source_file)
        assert loader.source_path == source_file
        assert loader.encoding == "utf-8"

    def test_loader_accepts_string_path(self, source_file):
        """FileTranslationLoader converts string paths."""
        loader = FileTranslationLoader(str(source_file))
        assert loader.source_path == source_file

    def test_loader_missing_file(self, tmp_path):
        """FileTranslationLoader raises ValueError for a missing file."""
        with pytest.raises(ValueError):
            FileTranslationLoader(tmp_path / "missing.csv")

    def test_loader_directory_rejected(self, tmp_path):
        """FileTranslationLoader raises ValueError for a directory."""
        with pytest.raises(ValueError):
            FileTranslationLoader(tmp_path)

    def test_load(self, source_file):
        """load() reads and parses the file."""
        table = FileTranslationLoader(source_file).load()
        assert table.get_available_languages() == ["en-US", "fr-FR", "es-ES"]
        assert table.translate("Adiós", "es-ES", "fr-FR") == "Au revoir"

    def test_load_with_encoding(self, tmp_path):
        """load() decodes the file with the configured encoding."""
        path = tmp_path / "latin.csv"
        path.write_bytes("en,fr\nYes,Oui\nSummer,Été\n".encode("latin-1"))

        table = FileTranslationLoader(path, encoding="latin-1").load()

        assert table.translate("Summer", "en", "fr") == "Été"

    def test_load_empty_file(self, tmp_path):
        """load() raises InvalidInputError for an empty file."""
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(InvalidInputError):
            FileTranslationLoader(path).load()
