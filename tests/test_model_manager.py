from __future__ import annotations

import pytest

from addressbook.domain import AddressBook, NameKeywordsFilter
from addressbook.model import (
    ModelManager,
    NoRedoableStateError,
    NoUndoableStateError,
    VersionedAddressBook,
)

from typical_persons import ALICE, BENSON, BOB, CARL, typical_address_book


def test_versioned_address_book_undo_redo() -> None:
    first = AddressBook.of((ALICE,))
    second = first.with_person_added(BOB)
    versioned = VersionedAddressBook.starting_from(AddressBook())
    versioned.commit(first)
    versioned.commit(second)

    assert versioned.undo() == first
    assert versioned.can_redo()
    assert versioned.redo() == second
    assert not versioned.can_redo()


def test_versioned_commit_discards_redo_states() -> None:
    versioned = VersionedAddressBook()
    versioned.commit(AddressBook.of((ALICE,)))
    versioned.undo()
    versioned.commit(AddressBook.of((BOB,)))
    assert not versioned.can_redo()
    assert versioned.current == AddressBook.of((BOB,))


def test_versioned_errors_at_bounds() -> None:
    versioned = VersionedAddressBook()
    with pytest.raises(NoUndoableStateError):
        versioned.undo()
    with pytest.raises(NoRedoableStateError):
        versioned.redo()


def test_model_filter_state_is_explicit() -> None:
    model = ModelManager(typical_address_book())
    model.update_filter(NameKeywordsFilter(keywords=("Meier",)))
    assert [person.name for person in model.filtered_persons()] == [
        "Benson Meier",
        "Daniel Meier",
    ]
    model.reset_filter_to_show_all()
    assert len(model.filtered_persons()) == 4


def test_model_undo_restores_snapshot_and_resets_filter() -> None:
    model = ModelManager(AddressBook.of((ALICE, CARL)))
    model.add_person(BOB)
    model.commit()
    model.update_filter(NameKeywordsFilter(keywords=("Bob",)))

    model.undo()

    assert model.address_book.persons == (ALICE, CARL)
    assert len(model.filtered_persons()) == 2
    model.redo()
    assert model.address_book.persons == (ALICE, CARL, BOB)


def test_model_set_person_and_has_person() -> None:
    model = ModelManager(AddressBook.of((ALICE, BENSON)))
    edited = ALICE.model_copy(update={"remark": "Likes coffee"})
    model.set_person(ALICE, edited)
    assert model.has_person(ALICE)
    assert model.address_book.persons[0] == edited
    assert not model.has_person(BOB)
