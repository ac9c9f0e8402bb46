"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from addressbook.commands import CommandExecutor, CommandHistory
from addressbook.config import AppSettings
from addressbook.domain import AddressBook
from addressbook.logic import LogicManager
from addressbook.model import ModelManager
from addressbook.persistence import AddressBookStorage, RepositoryError
from addressbook.persistence.sqlite import create_sqlite_storage
from addressbook.sample_data import sample_address_book

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates services sharing one configuration."""

    settings: AppSettings
    storage: AddressBookStorage
    executor: CommandExecutor
    history: CommandHistory


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    _ensure_sqlite_directory(resolved_settings.database_url)
    return ServiceContainer(
        settings=resolved_settings,
        storage=create_sqlite_storage(resolved_settings.database_url),
        executor=CommandExecutor(),
        history=CommandHistory(),
    )


async def load_initial_address_book(
    storage: AddressBookStorage,
    *,
    seed_sample_data: bool = True,
) -> AddressBook:
    """Read the stored book, falling back to sample data or an empty book."""

    try:
        stored = await storage.load()
    except RepositoryError as exc:
        logger.warning("Stored data could not be loaded, starting with an empty book: %s", exc)
        return AddressBook()
    if stored is not None:
        return stored
    if seed_sample_data:
        logger.info("No stored data found, starting with a sample address book")
        return sample_address_book()
    return AddressBook()


async def build_logic(container: ServiceContainer) -> LogicManager:
    book = await load_initial_address_book(
        container.storage,
        seed_sample_data=container.settings.seed_sample_data,
    )
    return LogicManager(
        ModelManager(book),
        container.storage,
        history=container.history,
        executor=container.executor,
        logger=logging.getLogger("addressbook.logic"),
    )


__all__ = ["ServiceContainer", "build_container", "build_logic", "load_initial_address_book"]
