"""Language selection model for a dropdown-style widget.

Holds the options and the selected index a dropdown displays, and switches
the coordinator's language when the selection changes. Wiring to an actual
widget is left to the host:

    selector = LanguageSelector(coordinator)
    dropdown.clear()
    dropdown.addItems(selector.options)
    dropdown.setCurrentIndex(selector.selected_index)
    dropdown.currentIndexChanged.connect(selector.on_value_changed)
"""

from typing import List

from infrastructure.i18n.coordinator import LocalizationCoordinator
from infrastructure.i18n.models import LanguageSwitchReport


class LanguageSelector:
    """Dropdown model listing the coordinator's languages.

    Attributes:
        coordinator: Coordinator switched on selection change.
        options: Language codes in table order.
        selected_index: Index of the selected language, -1 when the current
            language is not one of the options.
    """

    def __init__(self, coordinator: LocalizationCoordinator):
        self.coordinator = coordinator
        self.options: List[str] = coordinator.get_available_languages()
        current = coordinator.current_language
        self.selected_index = self.options.index(current) if current in self.options else -1

    @property
    def selected_language(self) -> str | None:
        if self.selected_index < 0:
            return None
        return self.options[self.selected_index]

    def on_value_changed(self, index: int) -> LanguageSwitchReport:
        """Switch to the language at ``index``.

        Raises:
            IndexError: If ``index`` is not a valid option; the coordinator is
                left untouched.
        """
        if not 0 <= index < len(self.options):
            raise IndexError(f"No language option at index {index}")
        report = self.coordinator.set_language(self.options[index])
        self.selected_index = index
        return report
