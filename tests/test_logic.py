from __future__ import annotations

import asyncio

import pytest

from addressbook.commands import CommandError
from addressbook.domain import AddressBook, Person
from addressbook.logic import LogicManager
from addressbook.model import ModelManager
from addressbook.parser import ParseError
from addressbook.persistence import InMemoryAddressBookStorage, RepositoryError

from typical_persons import ALICE, BOB


class FailingStorage(InMemoryAddressBookStorage):
    async def save(self, book: AddressBook) -> None:
        raise RepositoryError("disk full")


def _logic(
    book: AddressBook,
    storage: InMemoryAddressBookStorage | None = None,
) -> tuple[LogicManager, InMemoryAddressBookStorage]:
    resolved = storage or InMemoryAddressBookStorage()
    return LogicManager(ModelManager(book), resolved), resolved


def test_remark_text_command_updates_and_saves() -> None:
    plain = Person(name="Alice", phone="94351253", email="alice@example.com", address="Street 1")
    logic, storage = _logic(AddressBook.of((plain,)))

    result = asyncio.run(logic.execute("remark 1 r/Likes coffee"))

    updated = plain.model_copy(update={"remark": "Likes coffee"})
    assert result.feedback == f"Remark updated: {updated}"
    assert logic.address_book.persons == (updated,)
    assert asyncio.run(storage.load()) == logic.address_book
    assert storage.save_count == 1


def test_read_only_commands_do_not_save() -> None:
    logic, storage = _logic(AddressBook.of((ALICE, BOB)))
    asyncio.run(logic.execute("find bob"))
    asyncio.run(logic.execute("list"))
    assert storage.save_count == 0
    assert len(logic.filtered_persons()) == 2


def test_failed_commands_are_still_recorded_in_history() -> None:
    logic, storage = _logic(AddressBook.of((ALICE, BOB)))

    with pytest.raises(CommandError, match="index provided is invalid"):
        asyncio.run(logic.execute("remark 5 r/x"))
    with pytest.raises(ParseError):
        asyncio.run(logic.execute("bogus"))

    assert logic.history.entries() == ("remark 5 r/x", "bogus")
    assert logic.address_book.persons == (ALICE, BOB)
    assert storage.save_count == 0

    result = asyncio.run(logic.execute("history"))
    assert result.feedback.endswith("bogus\nremark 5 r/x")


def test_undo_saves_restored_snapshot() -> None:
    logic, storage = _logic(AddressBook.of((ALICE,)))
    asyncio.run(logic.execute("delete 1"))
    asyncio.run(logic.execute("undo"))
    assert asyncio.run(storage.load()) == AddressBook.of((ALICE,))
    assert storage.save_count == 2


def test_storage_failure_becomes_command_error() -> None:
    logic, _ = _logic(AddressBook.of((ALICE,)), FailingStorage())
    with pytest.raises(CommandError, match="Could not save data: disk full"):
        asyncio.run(logic.execute("clear"))
