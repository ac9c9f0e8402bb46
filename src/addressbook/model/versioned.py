"""Snapshot history backing undo and redo."""

from __future__ import annotations

from dataclasses import dataclass, field

from addressbook.domain import AddressBook

from .exceptions import NoRedoableStateError, NoUndoableStateError


@dataclass(slots=True)
class VersionedAddressBook:
    """Committed address book snapshots with a pointer to the current one."""

    _states: list[AddressBook] = field(default_factory=lambda: [AddressBook()])
    _pointer: int = 0

    @classmethod
    def starting_from(cls, book: AddressBook) -> VersionedAddressBook:
        return cls(_states=[book], _pointer=0)

    @property
    def current(self) -> AddressBook:
        return self._states[self._pointer]

    def commit(self, book: AddressBook) -> None:
        """Record ``book`` as the newest state, discarding any redoable states."""

        del self._states[self._pointer + 1 :]
        self._states.append(book)
        self._pointer += 1

    def can_undo(self) -> bool:
        return self._pointer > 0

    def can_redo(self) -> bool:
        return self._pointer < len(self._states) - 1

    def undo(self) -> AddressBook:
        if not self.can_undo():
            msg = "Current state pointer at start of address book state list, unable to undo."
            raise NoUndoableStateError(msg)
        self._pointer -= 1
        return self.current

    def redo(self) -> AddressBook:
        if not self.can_redo():
            msg = "Current state pointer at end of address book state list, unable to redo."
            raise NoRedoableStateError(msg)
        self._pointer += 1
        return self.current


__all__ = ["VersionedAddressBook"]
