"""Domain layer exports."""

from .address_book import AddressBook
from .base import DomainModel
from .descriptor import PersonDescriptor
from .exceptions import AddressBookError, DuplicatePersonError, PersonNotFoundError
from .filters import NameKeywordsFilter, PersonFilter, ShowAllFilter
from .person import Person

__all__ = [
    "AddressBook",
    "AddressBookError",
    "DomainModel",
    "DuplicatePersonError",
    "NameKeywordsFilter",
    "Person",
    "PersonDescriptor",
    "PersonFilter",
    "PersonNotFoundError",
    "ShowAllFilter",
]
