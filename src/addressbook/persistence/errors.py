"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class DataLoadingError(RepositoryError):
    """Raised when stored data cannot be turned back into an address book."""


__all__ = ["DataLoadingError", "RepositoryError"]
