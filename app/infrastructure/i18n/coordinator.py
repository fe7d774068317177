"""Language switching across the host's localizable slots.

The coordinator remembers which language the slots are displayed in. On a
switch it asks the slot provider for the current slots and replaces each
slot's text with its translation from the translation table.
"""

from typing import List

import structlog

from infrastructure.i18n.models import LanguageSwitchReport, SlotApplyFailure
from infrastructure.i18n.slots import LocalizableSlot, SlotProvider
from infrastructure.i18n.table import TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocalizationCoordinator:
    """Applies table-driven language switches to localizable slots.

    One coordinator is created per running application and handed to
    whatever needs to switch languages (e.g. a language selector).
    ``set_language`` is not thread-safe; concurrent hosts must serialize
    calls.

    Attributes:
        table: TranslationTable used for every lookup.
        slot_provider: Provider asked for the slots on each switch.
    """

    def __init__(
        self,
        table: TranslationTable,
        default_language: str,
        slot_provider: SlotProvider,
    ):
        """Initialize the coordinator.

        The default language is not checked against the table; an unknown
        language shows up as per-slot failures on the first switch.

        Args:
            table: TranslationTable to translate with.
            default_language: Language the slots are initially displayed in.
            slot_provider: Provider of the slots to translate.
        """
        self._table = table
        self._current_language = default_language
        self.slot_provider = slot_provider
        logger.info(
            "initialized_localization_coordinator",
            default_language=default_language,
            available_languages=table.get_available_languages(),
        )

    @property
    def table(self) -> TranslationTable:
        return self._table

    @property
    def current_language(self) -> str:
        """Language the slots are currently displayed in."""
        return self._current_language

    def get_available_languages(self) -> List[str]:
        """Get the table's language codes in header order."""
        return self._table.get_available_languages()

    def set_language(self, language: str) -> LanguageSwitchReport:
        """Switch every slot to ``language``.

        The current language is updated only after all slots were processed.
        Slots already rewritten stay rewritten if the switch is interrupted.

        Args:
            language: Language code to switch to.

        Returns:
            LanguageSwitchReport describing applied and failed slots.
        """
        report = self.apply_language(language)
        self._current_language = language
        return report

    def apply_language(self, to_language: str) -> LanguageSwitchReport:
        """Translate every slot from the current language to ``to_language``.

        A slot whose text cannot be read, translated or written is skipped
        and recorded in the report; the remaining slots are still processed.
        An empty translation is written like any other.

        Args:
            to_language: Language code to translate to.

        Returns:
            LanguageSwitchReport describing applied and failed slots.
        """
        from_language = self._current_language
        report = LanguageSwitchReport(from_language=from_language, to_language=to_language)

        with structlog.contextvars.bound_contextvars(
            from_language=from_language, to_language=to_language
        ):
            slots = self.slot_provider.enumerate_localizable_slots()
            for slot in slots:
                failure = self._apply_to_slot(slot, from_language, to_language)
                if failure is None:
                    report.applied += 1
                else:
                    report.failures.append(failure)

            if report.failures:
                logger.warning(
                    "language_switch_incomplete",
                    applied=report.applied,
                    failed=len(report.failures),
                )
            else:
                logger.info("language_switch_completed", applied=report.applied)

        return report

    def _apply_to_slot(
        self,
        slot: LocalizableSlot,
        from_language: str,
        to_language: str,
    ) -> SlotApplyFailure | None:
        """Translate a single slot, returning a failure record instead of raising."""
        text = None
        try:
            text = slot.get()
            if not isinstance(text, str):
                raise TypeError(f"Slot holds {type(text).__name__}, not str")
            slot.set(self._table.translate(text, from_language, to_language))
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "slot_translation_failed",
                slot=repr(slot),
                text=text,
                error=str(e),
                error_type=type(e).__name__,
            )
            return SlotApplyFailure(slot=slot, text=text, error=e)
        return None
