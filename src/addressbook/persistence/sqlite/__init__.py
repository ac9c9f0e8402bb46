"""SQLite persistence implementation."""

from .storage import SQLiteAddressBookStorage, create_sqlite_storage

__all__ = ["SQLiteAddressBookStorage", "create_sqlite_storage"]
