"""Dispatch of command variants to their handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from addressbook.model import Model

from . import handlers
from .history import CommandHistory
from .variants import Command, CommandKind, CommandResult

Handler = Callable[[Any, Model, CommandHistory], CommandResult]

DEFAULT_HANDLERS: Mapping[CommandKind, Handler] = {
    CommandKind.ADD: handlers.handle_add,
    CommandKind.EDIT: handlers.handle_edit,
    CommandKind.REMARK: handlers.handle_remark,
    CommandKind.DELETE: handlers.handle_delete,
    CommandKind.SORT: handlers.handle_sort,
    CommandKind.FIND: handlers.handle_find,
    CommandKind.LIST: handlers.handle_list,
    CommandKind.CLEAR: handlers.handle_clear,
    CommandKind.UNDO: handlers.handle_undo,
    CommandKind.REDO: handlers.handle_redo,
    CommandKind.HISTORY: handlers.handle_history,
    CommandKind.HELP: handlers.handle_help,
    CommandKind.EXIT: handlers.handle_exit,
}

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandExecutor:
    """Registry mapping command kinds to handler functions."""

    _handlers: dict[CommandKind, Handler] = field(
        default_factory=lambda: dict(DEFAULT_HANDLERS)
    )

    def register(self, kind: CommandKind, handler: Handler, *, override: bool = False) -> None:
        if not override and kind in self._handlers:
            msg = f"Handler for {kind} already registered"
            raise ValueError(msg)
        self._handlers[kind] = handler

    def supports(self, kind: CommandKind) -> bool:
        return kind in self._handlers

    def execute(self, command: Command, model: Model, history: CommandHistory) -> CommandResult:
        try:
            handler = self._handlers[command.kind]
        except KeyError as exc:
            msg = f"No handler registered for {command.kind}"
            raise KeyError(msg) from exc
        logger.debug("Executing %s command", command.kind)
        return handler(command, model, history)


__all__ = ["DEFAULT_HANDLERS", "CommandExecutor", "Handler"]
