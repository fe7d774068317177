"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    Label,
    make_coordinator,
    make_labels,
    make_slot_registry,
    make_source_text,
    make_translation_table,
)

__all__ = [
    "Label",
    "make_coordinator",
    "make_labels",
    "make_slot_registry",
    "make_source_text",
    "make_translation_table",
]
