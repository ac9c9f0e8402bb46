"""Handler functions, one per command variant."""

from __future__ import annotations

from addressbook.domain import AddressBook
from addressbook.model import Model

from .exceptions import CommandError, DuplicatePersonCommandError
from .history import CommandHistory
from .messages import (
    ALL_USAGES,
    MESSAGE_ADD_SUCCESS,
    MESSAGE_CLEAR_SUCCESS,
    MESSAGE_DELETE_SUCCESS,
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_EDIT_SUCCESS,
    MESSAGE_EXIT,
    MESSAGE_HISTORY_EMPTY,
    MESSAGE_HISTORY_SUCCESS,
    MESSAGE_LIST_SUCCESS,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    MESSAGE_REDO_FAILURE,
    MESSAGE_REDO_SUCCESS,
    MESSAGE_REMARK_SUCCESS,
    MESSAGE_SORT_SUCCESS,
    MESSAGE_UNDO_FAILURE,
    MESSAGE_UNDO_SUCCESS,
)
from .partial_update import apply_partial_update, resolve_displayed
from .variants import (
    AddCommand,
    ClearCommand,
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


def handle_add(command: AddCommand, model: Model, history: CommandHistory) -> CommandResult:
    if model.has_person(command.person):
        raise DuplicatePersonCommandError(MESSAGE_DUPLICATE_PERSON)
    model.add_person(command.person)
    model.commit()
    return CommandResult(feedback=MESSAGE_ADD_SUCCESS.format(person=command.person))


def handle_edit(command: EditCommand, model: Model, history: CommandHistory) -> CommandResult:
    edited = apply_partial_update(model, command.index, command.descriptor)
    return CommandResult(feedback=MESSAGE_EDIT_SUCCESS.format(person=edited))


def handle_remark(command: RemarkCommand, model: Model, history: CommandHistory) -> CommandResult:
    edited = apply_partial_update(model, command.index, command.descriptor)
    return CommandResult(feedback=MESSAGE_REMARK_SUCCESS.format(person=edited))


def handle_delete(command: DeleteCommand, model: Model, history: CommandHistory) -> CommandResult:
    target = resolve_displayed(model, command.index)
    model.delete_person(target)
    model.commit()
    return CommandResult(feedback=MESSAGE_DELETE_SUCCESS.format(person=target))


def handle_sort(command: SortCommand, model: Model, history: CommandHistory) -> CommandResult:
    model.sort_persons_by_name()
    model.reset_filter_to_show_all()
    model.commit()
    return CommandResult(feedback=MESSAGE_SORT_SUCCESS)


def handle_find(command: FindCommand, model: Model, history: CommandHistory) -> CommandResult:
    model.update_filter(command.person_filter)
    count = len(model.filtered_persons())
    return CommandResult(feedback=MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=count))


def handle_list(command: ListCommand, model: Model, history: CommandHistory) -> CommandResult:
    model.reset_filter_to_show_all()
    return CommandResult(feedback=MESSAGE_LIST_SUCCESS)


def handle_clear(command: ClearCommand, model: Model, history: CommandHistory) -> CommandResult:
    model.set_address_book(AddressBook())
    model.reset_filter_to_show_all()
    model.commit()
    return CommandResult(feedback=MESSAGE_CLEAR_SUCCESS)


def handle_undo(command: UndoCommand, model: Model, history: CommandHistory) -> CommandResult:
    if not model.can_undo():
        raise CommandError(MESSAGE_UNDO_FAILURE)
    model.undo()
    return CommandResult(feedback=MESSAGE_UNDO_SUCCESS)


def handle_redo(command: RedoCommand, model: Model, history: CommandHistory) -> CommandResult:
    if not model.can_redo():
        raise CommandError(MESSAGE_REDO_FAILURE)
    model.redo()
    return CommandResult(feedback=MESSAGE_REDO_SUCCESS)


def handle_history(
    command: HistoryCommand,
    model: Model,
    history: CommandHistory,
) -> CommandResult:
    entries = history.most_recent_first()
    if not entries:
        return CommandResult(feedback=MESSAGE_HISTORY_EMPTY)
    return CommandResult(feedback=MESSAGE_HISTORY_SUCCESS.format(entries="\n".join(entries)))


def handle_help(command: HelpCommand, model: Model, history: CommandHistory) -> CommandResult:
    return CommandResult(feedback="\n\n".join(ALL_USAGES), show_help=True)


def handle_exit(command: ExitCommand, model: Model, history: CommandHistory) -> CommandResult:
    return CommandResult(feedback=MESSAGE_EXIT, exit=True)
