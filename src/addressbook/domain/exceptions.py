"""Domain-level exceptions for the address book."""

from __future__ import annotations


class AddressBookError(RuntimeError):
    """Base class for address book invariant violations."""


class DuplicatePersonError(AddressBookError):
    """Raised when an operation would store two persons with the same identity."""


class PersonNotFoundError(AddressBookError):
    """Raised when the referenced person is not in the address book."""


__all__ = ["AddressBookError", "DuplicatePersonError", "PersonNotFoundError"]
