"""Command layer exports."""

from .exceptions import CommandError, DuplicatePersonCommandError, InvalidIndexError
from .executor import CommandExecutor
from .history import CommandHistory
from .partial_update import apply_partial_update
from .variants import (
    AddCommand,
    ClearCommand,
    Command,
    CommandKind,
    CommandResult,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    HistoryCommand,
    ListCommand,
    RedoCommand,
    RemarkCommand,
    SortCommand,
    UndoCommand,
)

__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandError",
    "CommandExecutor",
    "CommandHistory",
    "CommandKind",
    "CommandResult",
    "DeleteCommand",
    "DuplicatePersonCommandError",
    "EditCommand",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "HistoryCommand",
    "InvalidIndexError",
    "ListCommand",
    "RedoCommand",
    "RemarkCommand",
    "SortCommand",
    "UndoCommand",
    "apply_partial_update",
]
