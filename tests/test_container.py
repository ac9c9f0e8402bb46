from __future__ import annotations

import asyncio
from pathlib import Path

from sqlalchemy import text

from addressbook.config import AppSettings
from addressbook.container import build_container, build_logic, load_initial_address_book
from addressbook.domain import AddressBook
from addressbook.persistence import DataLoadingError, InMemoryAddressBookStorage
from addressbook.persistence.sqlite import create_sqlite_storage
from addressbook.sample_data import sample_address_book

from typical_persons import typical_address_book


class CorruptStorage(InMemoryAddressBookStorage):
    async def load(self) -> AddressBook | None:
        raise DataLoadingError("bad data")


def test_build_container_seeds_sample_data(tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'nested'/'container.db'}"
    settings = AppSettings(environment="test", database_url=db_url)

    container = build_container(settings)

    assert (tmp_path / "nested").exists()
    logic = asyncio.run(build_logic(container))
    assert logic.address_book == sample_address_book()
    assert len(logic.address_book) == 6


def test_load_initial_address_book_prefers_stored_data() -> None:
    storage = InMemoryAddressBookStorage()
    asyncio.run(storage.save(typical_address_book()))
    assert asyncio.run(load_initial_address_book(storage)) == typical_address_book()


def test_load_initial_address_book_fallbacks() -> None:
    empty = asyncio.run(
        load_initial_address_book(InMemoryAddressBookStorage(), seed_sample_data=False)
    )
    assert empty == AddressBook()
    assert asyncio.run(load_initial_address_book(CorruptStorage())) == AddressBook()


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ADDRESSBOOK_ENV", "ci")
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADDRESSBOOK_SEED_SAMPLE", "no")
    settings = AppSettings.from_env()
    assert settings.environment == "ci"
    assert settings.log_level == "DEBUG"
    assert settings.seed_sample_data is False


def test_load_initial_address_book_falls_back_on_malformed_json(tmp_path: Path) -> None:
    storage = create_sqlite_storage(f"sqlite+aiosqlite:///{tmp_path/'broken.db'}")
    asyncio.run(storage.save(typical_address_book()))

    async def _corrupt() -> None:
        async with storage._session_factory() as session, session.begin():
            await session.execute(text("UPDATE persons SET payload = '{not json'"))

    asyncio.run(_corrupt())

    assert asyncio.run(load_initial_address_book(storage)) == AddressBook()


def test_load_initial_address_book_falls_back_on_unreadable_file(tmp_path: Path) -> None:
    db_file = tmp_path / "garbage.db"
    db_file.write_bytes(b"\x00\xffgarbage" * 128)
    storage = create_sqlite_storage(f"sqlite+aiosqlite:///{db_file}")

    assert asyncio.run(load_initial_address_book(storage)) == AddressBook()


def test_settings_fall_back_to_warning_for_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "verbose")
    assert AppSettings.from_env().log_level == "WARNING"
