"""Entry point tying parsing, execution, history and storage together."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from addressbook.commands import CommandError, CommandExecutor, CommandHistory, CommandResult
from addressbook.domain import AddressBook, Person
from addressbook.model import Model
from addressbook.parser import parse_command
from addressbook.persistence import AddressBookStorage, RepositoryError

MESSAGE_SAVE_FAILED = "Could not save data: {error}"


class LogicManager:
    """Runs one command line at a time against the model."""

    def __init__(
        self,
        model: Model,
        storage: AddressBookStorage,
        *,
        history: CommandHistory | None = None,
        executor: CommandExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._model = model
        self._storage = storage
        self._history = history or CommandHistory()
        self._executor = executor or CommandExecutor()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def address_book(self) -> AddressBook:
        return self._model.address_book

    @property
    def history(self) -> CommandHistory:
        return self._history

    def filtered_persons(self) -> Sequence[Person]:
        return self._model.filtered_persons()

    async def execute(self, command_text: str) -> CommandResult:
        """Parse and run ``command_text``, saving the book if it changed.

        Raises ``ParseError`` or ``CommandError`` for rejected input; the
        line is recorded in the history either way.
        """

        self._logger.info("User command: %s", command_text)
        before = self._model.address_book
        try:
            command = parse_command(command_text)
            result = self._executor.execute(command, self._model, self._history)
        finally:
            self._history.add(command_text)

        after = self._model.address_book
        if after is not before:
            try:
                await self._storage.save(after)
            except RepositoryError as exc:
                self._logger.warning("Saving address book failed: %s", exc)
                raise CommandError(MESSAGE_SAVE_FAILED.format(error=exc)) from exc
        return result


__all__ = ["LogicManager"]
