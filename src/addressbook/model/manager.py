"""Default in-memory model implementation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from addressbook.domain import AddressBook, Person, PersonFilter, ShowAllFilter

from .interfaces import Model
from .versioned import VersionedAddressBook

logger = logging.getLogger(__name__)


class ModelManager(Model):
    """Holds the current address book, its history and the active filter."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        initial = address_book if address_book is not None else AddressBook()
        logger.debug("Initializing model with %d persons", len(initial))
        self._book = initial
        self._history = VersionedAddressBook.starting_from(initial)
        self._filter: PersonFilter = ShowAllFilter()

    @property
    def address_book(self) -> AddressBook:
        return self._book

    @property
    def active_filter(self) -> PersonFilter:
        return self._filter

    def set_address_book(self, book: AddressBook) -> None:
        self._book = book

    def filtered_persons(self) -> Sequence[Person]:
        return tuple(person for person in self._book.persons if self._filter.matches(person))

    def has_person(self, person: Person) -> bool:
        return self._book.contains(person)

    def add_person(self, person: Person) -> None:
        self._book = self._book.with_person_added(person)
        self.reset_filter_to_show_all()

    def delete_person(self, person: Person) -> None:
        self._book = self._book.with_person_removed(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._book = self._book.with_person_replaced(target, edited)

    def sort_persons_by_name(self) -> None:
        self._book = self._book.sorted_by_name()

    def update_filter(self, person_filter: PersonFilter) -> None:
        self._filter = person_filter

    def reset_filter_to_show_all(self) -> None:
        self._filter = ShowAllFilter()

    def commit(self) -> None:
        self._history.commit(self._book)

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def undo(self) -> None:
        self._book = self._history.undo()
        self.reset_filter_to_show_all()

    def redo(self) -> None:
        self._book = self._history.redo()
        self.reset_filter_to_show_all()


__all__ = ["ModelManager"]
