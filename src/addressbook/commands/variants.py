"""The closed set of commands understood by the address book."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, NonNegativeInt

from addressbook.domain import DomainModel, NameKeywordsFilter, Person, PersonDescriptor


class CommandKind(StrEnum):
    """Command words, used as the variant tag for dispatch."""

    ADD = "add"
    EDIT = "edit"
    REMARK = "remark"
    DELETE = "delete"
    SORT = "sort"
    FIND = "find"
    LIST = "list"
    CLEAR = "clear"
    UNDO = "undo"
    REDO = "redo"
    HISTORY = "history"
    HELP = "help"
    EXIT = "exit"


class AddCommand(DomainModel):
    kind: Literal[CommandKind.ADD] = CommandKind.ADD
    person: Person


class EditCommand(DomainModel):
    """Replace any subset of fields of the person at ``index``."""

    kind: Literal[CommandKind.EDIT] = CommandKind.EDIT
    index: NonNegativeInt
    descriptor: PersonDescriptor


class RemarkCommand(DomainModel):
    """Partial update whose descriptor always carries a remark."""

    kind: Literal[CommandKind.REMARK] = CommandKind.REMARK
    index: NonNegativeInt
    descriptor: PersonDescriptor


class DeleteCommand(DomainModel):
    kind: Literal[CommandKind.DELETE] = CommandKind.DELETE
    index: NonNegativeInt


class SortCommand(DomainModel):
    kind: Literal[CommandKind.SORT] = CommandKind.SORT


class FindCommand(DomainModel):
    kind: Literal[CommandKind.FIND] = CommandKind.FIND
    person_filter: NameKeywordsFilter


class ListCommand(DomainModel):
    kind: Literal[CommandKind.LIST] = CommandKind.LIST


class ClearCommand(DomainModel):
    kind: Literal[CommandKind.CLEAR] = CommandKind.CLEAR


class UndoCommand(DomainModel):
    kind: Literal[CommandKind.UNDO] = CommandKind.UNDO


class RedoCommand(DomainModel):
    kind: Literal[CommandKind.REDO] = CommandKind.REDO


class HistoryCommand(DomainModel):
    kind: Literal[CommandKind.HISTORY] = CommandKind.HISTORY


class HelpCommand(DomainModel):
    kind: Literal[CommandKind.HELP] = CommandKind.HELP


class ExitCommand(DomainModel):
    kind: Literal[CommandKind.EXIT] = CommandKind.EXIT


Command = Annotated[
    AddCommand
    | EditCommand
    | RemarkCommand
    | DeleteCommand
    | SortCommand
    | FindCommand
    | ListCommand
    | ClearCommand
    | UndoCommand
    | RedoCommand
    | HistoryCommand
    | HelpCommand
    | ExitCommand,
    Field(discriminator="kind"),
]


class CommandResult(DomainModel):
    """Feedback for the user plus presentation flags."""

    feedback: str
    show_help: bool = False
    exit: bool = False


__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandKind",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "HistoryCommand",
    "ListCommand",
    "RedoCommand",
    "RemarkCommand",
    "SortCommand",
    "UndoCommand",
]
