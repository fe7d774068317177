"""Localization models.

Defines the records produced when a language switch is applied to the
host's localizable slots.
"""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class SlotApplyFailure:
    """A slot that could not be translated during a language switch.

    The failure is isolated to this slot; the switch carries on with the
    remaining slots.

    Attributes:
        slot: The slot that failed.
        text: The value read from the slot. Normally a str; any other type
            when the slot held a non-string, or None if reading it failed.
        error: The exception raised while reading, translating or writing.
    """

    slot: Any
    text: Any
    error: Exception

    @property
    def reason(self) -> str:
        """Name of the error type (e.g. "NoSuchEntryError")."""
        return type(self.error).__name__


@dataclass
class LanguageSwitchReport:
    """Outcome of applying a language to every localizable slot.

    Attributes:
        from_language: Language the slots were displayed in.
        to_language: Language the slots were switched to.
        applied: Number of slots whose text was replaced.
        failures: Slots that were left untouched.
    """

    from_language: str
    to_language: str
    applied: int = 0
    failures: List[SlotApplyFailure] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when every slot was translated."""
        return not self.failures

    @property
    def total(self) -> int:
        return self.applied + len(self.failures)
