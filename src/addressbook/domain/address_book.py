"""Immutable ordered collection of persons."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import field_validator

from .base import DomainModel
from .exceptions import DuplicatePersonError, PersonNotFoundError
from .person import Person


class AddressBook(DomainModel):
    """Snapshot of every stored person, in display order.

    Every mutator returns a new book, so a snapshot handed to the undo history
    can never change underneath it.
    """

    persons: tuple[Person, ...] = ()

    @field_validator("persons")
    @classmethod
    def ensure_unique(cls, value: tuple[Person, ...]) -> tuple[Person, ...]:
        seen: set[tuple[str, str, str, str]] = set()
        for person in value:
            key = person.identity()
            if key in seen:
                msg = f"Duplicate person in address book: {person.name}"
                raise ValueError(msg)
            seen.add(key)
        return value

    @classmethod
    def of(cls, persons: Iterable[Person]) -> AddressBook:
        return cls(persons=tuple(persons))

    def __len__(self) -> int:
        return len(self.persons)

    def contains(self, person: Person) -> bool:
        """Return True if a person with the same identity is stored."""

        return any(existing.is_same_person(person) for existing in self.persons)

    def index_of(self, person: Person) -> int:
        for position, existing in enumerate(self.persons):
            if existing == person:
                return position
        msg = f"Person {person.name} is not in the address book"
        raise PersonNotFoundError(msg)

    def with_person_added(self, person: Person) -> AddressBook:
        if self.contains(person):
            msg = f"Person {person.name} already exists"
            raise DuplicatePersonError(msg)
        return AddressBook(persons=(*self.persons, person))

    def with_person_replaced(self, target: Person, edited: Person) -> AddressBook:
        """Swap ``target`` for ``edited`` in place, keeping its position."""

        position = self.index_of(target)
        others = self.persons[:position] + self.persons[position + 1 :]
        if any(existing.is_same_person(edited) for existing in others):
            msg = f"Person {edited.name} already exists"
            raise DuplicatePersonError(msg)
        replaced = (*self.persons[:position], edited, *self.persons[position + 1 :])
        return AddressBook(persons=replaced)

    def with_person_removed(self, person: Person) -> AddressBook:
        position = self.index_of(person)
        return AddressBook(persons=self.persons[:position] + self.persons[position + 1 :])

    def sorted_by_name(self) -> AddressBook:
        ordered = sorted(self.persons, key=lambda person: (person.name.casefold(), person.name))
        return AddressBook(persons=tuple(ordered))


__all__ = ["AddressBook"]
