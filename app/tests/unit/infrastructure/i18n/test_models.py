"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n import (
    LanguageSwitchReport,
    NoSuchEntryError,
    SlotApplyFailure,
)


class TestSlotApplyFailure:
    """Tests for SlotApplyFailure."""

    def test_reason_is_error_type(self):
        """reason names the exception class."""
        failure = SlotApplyFailure(slot=object(), text="Hi", error=NoSuchEntryError("Hi", "en"))
        assert failure.reason == "NoSuchEntryError"

    def test_text_keeps_non_string_value(self):
        """text holds whatever the slot returned, strings or not."""
        failure = SlotApplyFailure(slot=None, text=42, error=TypeError("not a str"))
        assert failure.text == 42
        assert failure.reason == "TypeError"

    def test_frozen(self):
        """SlotApplyFailure is immutable."""
        failure = SlotApplyFailure(slot=None, text=None, error=TypeError("x"))
        with pytest.raises(AttributeError):
            failure.text = "changed"


class TestLanguageSwitchReport:
    """Tests for LanguageSwitchReport."""

    def test_defaults(self):
        """A new report has nothing applied and no failures."""
        report = LanguageSwitchReport(from_language="en", to_language="fr")
        assert report.applied == 0
        assert report.failures == []
        assert report.is_complete
        assert report.total == 0

    def test_incomplete_with_failures(self):
        """is_complete is False once a failure is recorded."""
        report = LanguageSwitchReport(from_language="en", to_language="fr", applied=2)
        report.failures.append(SlotApplyFailure(slot=None, text="x", error=TypeError()))
        assert not report.is_complete
        assert report.total == 3

    def test_failures_not_shared(self):
        """Each report has its own failures list."""
        first = LanguageSwitchReport(from_language="en", to_language="fr")
        second = LanguageSwitchReport(from_language="en", to_language="fr")
        first.failures.append(SlotApplyFailure(slot=None, text=None, error=TypeError()))
        assert second.failures == []
