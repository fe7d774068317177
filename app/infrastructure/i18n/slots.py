"""Localizable slots and the providers that enumerate them.

A slot is one text location in the host UI (a label, a widget's text, an
attribute of a model object). The coordinator only reads and writes slots
through ``get``/``set``, so the host decides how its texts are found.

Usage:
    registry = SlotRegistry()
    registry.register_attributes(menu, "title", "subtitle")
    registry.register(CallbackSlot(label.text, label.setText))

    coordinator = LocalizationCoordinator(table, "en-US", registry)
"""

from typing import Any, Callable, List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class LocalizableSlot(Protocol):
    """A readable and writable text location."""

    def get(self) -> str: ...

    def set(self, value: str) -> None: ...


@runtime_checkable
class SlotProvider(Protocol):
    """Source of the slots to translate on a language switch.

    Called once per switch; the returned slots may differ between calls.
    """

    def enumerate_localizable_slots(self) -> Sequence[LocalizableSlot]: ...


class AttributeSlot:
    """Slot backed by a named attribute of an object.

    Attributes:
        target: Object holding the text.
        attribute: Name of the attribute.
    """

    def __init__(self, target: Any, attribute: str):
        self.target = target
        self.attribute = attribute

    def get(self) -> str:
        return getattr(self.target, self.attribute)

    def set(self, value: str) -> None:
        setattr(self.target, self.attribute, value)

    def __eq__(self, other):
        # Same object and attribute, whatever the target's own equality says.
        if not isinstance(other, AttributeSlot):
            return NotImplemented
        return self.target is other.target and self.attribute == other.attribute

    def __hash__(self) -> int:
        return hash((id(self.target), self.attribute))

    def __repr__(self) -> str:
        return f"AttributeSlot({type(self.target).__name__}.{self.attribute})"


class CallbackSlot:
    """Slot backed by a getter and a setter callable.

    Example:
        CallbackSlot(label.text, label.setText)
    """

    def __init__(
        self,
        getter: Callable[[], str],
        setter: Callable[[str], None],
        name: str = "",
    ):
        self._getter = getter
        self._setter = setter
        self.name = name

    def get(self) -> str:
        return self._getter()

    def set(self, value: str) -> None:
        self._setter(value)

    def __repr__(self) -> str:
        return f"CallbackSlot({self.name or self._getter!r})"


class SlotRegistry:
    """Slot provider filled explicitly by the host.

    Slots are returned in registration order. A slot registered twice is
    kept once; two AttributeSlot instances for the same object and
    attribute count as the same slot.
    """

    def __init__(self, slots: Sequence[LocalizableSlot] = ()):
        self._slots: List[LocalizableSlot] = []
        for slot in slots:
            self.register(slot)

    def register(self, slot: LocalizableSlot) -> LocalizableSlot:
        """Add a slot.

        Returns:
            The registered slot, which is the earlier equal slot when one
            is already present.

        Raises:
            TypeError: If the object has no ``get``/``set`` methods.
        """
        if not isinstance(slot, LocalizableSlot):
            raise TypeError(f"{slot!r} does not implement get() and set()")
        for existing in self._slots:
            if existing == slot:
                return existing
        self._slots.append(slot)
        return slot

    def register_attributes(self, target: Any, *attributes: str) -> List[AttributeSlot]:
        """Register one AttributeSlot per attribute name of ``target``."""
        return [self.register(AttributeSlot(target, name)) for name in attributes]

    def unregister(self, slot: LocalizableSlot) -> bool:
        """Remove a slot.

        Returns:
            True if the slot was registered.
        """
        if slot in self._slots:
            self._slots.remove(slot)
            return True
        return False

    def clear(self) -> None:
        self._slots.clear()

    def enumerate_localizable_slots(self) -> List[LocalizableSlot]:
        return list(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
