"""Model layer exports."""

from .exceptions import HistoryError, NoRedoableStateError, NoUndoableStateError
from .interfaces import Model
from .manager import ModelManager
from .versioned import VersionedAddressBook

__all__ = [
    "HistoryError",
    "Model",
    "ModelManager",
    "NoRedoableStateError",
    "NoUndoableStateError",
    "VersionedAddressBook",
]
