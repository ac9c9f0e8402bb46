"""In-memory storage implementation for unit testing."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from addressbook.domain import AddressBook
from addressbook.persistence.interfaces import AddressBookStorage


@dataclass
class InMemoryAddressBookStorage(AddressBookStorage):
    _book: AddressBook | None = None
    save_count: int = 0
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def load(self) -> AddressBook | None:
        async with self._lock:
            return self._book

    async def save(self, book: AddressBook) -> None:
        async with self._lock:
            self._book = book
            self.save_count += 1
