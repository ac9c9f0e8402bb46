"""Persistence layer exports."""

from .errors import DataLoadingError, RepositoryError
from .interfaces import AddressBookStorage
from .memory import InMemoryAddressBookStorage

__all__ = [
    "AddressBookStorage",
    "DataLoadingError",
    "InMemoryAddressBookStorage",
    "RepositoryError",
]
