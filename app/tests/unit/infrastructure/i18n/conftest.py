"""Feature-level fixtures for i18n system tests.

Provides translation sources, tables and slot-backed coordinators.
"""

import pytest

from infrastructure.i18n import TranslationTable
from tests.factories.i18n import (
    make_coordinator,
    make_labels,
    make_source_text,
)


@pytest.fixture
def source_text():
    """Three-language source with three rows and a trailing newline."""
    return make_source_text()


@pytest.fixture
def table(source_text):
    """TranslationTable parsed from source_text."""
    return TranslationTable.parse(source_text)


@pytest.fixture
def source_file(tmp_path, source_text):
    """Translation source written to a temporary file."""
    path = tmp_path / "translations.csv"
    path.write_text(source_text, encoding="utf-8")
    return path


@pytest.fixture
def labels():
    """Labels displaying English texts of the default table."""
    return make_labels("Hello", "Goodbye", "Quit")


@pytest.fixture
def coordinator(labels, table):
    """Coordinator starting in en-US over the labels."""
    return make_coordinator(labels, table=table, default_language="en-US")
