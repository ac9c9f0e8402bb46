"""Persistence abstraction for the address book."""

from __future__ import annotations

from typing import Protocol

from addressbook.domain import AddressBook


class AddressBookStorage(Protocol):
    """Loads and saves whole address book snapshots."""

    async def load(self) -> AddressBook | None:
        """Return the stored book, or ``None`` when nothing was saved yet."""
        ...

    async def save(self, book: AddressBook) -> None: ...
