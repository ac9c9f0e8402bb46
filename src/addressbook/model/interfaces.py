"""Model collaborator consumed by commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from addressbook.domain import AddressBook, Person, PersonFilter


class Model(Protocol):
    """In-memory address book state with a filtered view and undo history."""

    @property
    def address_book(self) -> AddressBook: ...

    def set_address_book(self, book: AddressBook) -> None: ...

    def filtered_persons(self) -> Sequence[Person]: ...

    def has_person(self, person: Person) -> bool: ...

    def add_person(self, person: Person) -> None: ...

    def delete_person(self, person: Person) -> None: ...

    def set_person(self, target: Person, edited: Person) -> None: ...

    def sort_persons_by_name(self) -> None: ...

    def update_filter(self, person_filter: PersonFilter) -> None: ...

    def reset_filter_to_show_all(self) -> None: ...

    def commit(self) -> None: ...

    def can_undo(self) -> bool: ...

    def can_redo(self) -> bool: ...

    def undo(self) -> None: ...

    def redo(self) -> None: ...
