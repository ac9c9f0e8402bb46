"""Exceptions raised by the model layer."""

from __future__ import annotations


class HistoryError(RuntimeError):
    """Base class for undo/redo failures."""


class NoUndoableStateError(HistoryError):
    """Raised when there is no earlier snapshot to return to."""


class NoRedoableStateError(HistoryError):
    """Raised when there is no later snapshot to move forward to."""


__all__ = ["HistoryError", "NoRedoableStateError", "NoUndoableStateError"]
