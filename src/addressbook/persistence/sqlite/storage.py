"""Async SQLite storage for address book snapshots."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from addressbook.domain import AddressBook
from addressbook.persistence.errors import DataLoadingError, RepositoryError
from addressbook.persistence.interfaces import AddressBookStorage

from .migrations import apply_migrations
from .models import PersonRecord, SnapshotRecord

_SNAPSHOT_ID = 1

_migration_lock = asyncio.Lock()
_migrated_urls: set[str] = set()


async def _ensure_migrated(engine: AsyncEngine, database_url: str) -> None:
    async with _migration_lock:
        if database_url in _migrated_urls:
            return
        await apply_migrations(engine)
        _migrated_urls.add(database_url)


class SQLiteAddressBookStorage(AddressBookStorage):
    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        database_url: str,
    ) -> None:
        self._engine = engine
        self._session_factory = session_factory
        self._database_url = database_url

    @property
    def database_url(self) -> str:
        return self._database_url

    async def load(self) -> AddressBook | None:
        try:
            await _ensure_migrated(self._engine, self._database_url)
            async with self._session_factory() as session:
                snapshot = await session.get(SnapshotRecord, _SNAPSHOT_ID)
                if snapshot is None:
                    return None
                result = await session.execute(
                    select(PersonRecord).order_by(PersonRecord.position)
                )
                payloads = [record.payload for record in result.scalars().all()]
        except SQLAlchemyError as exc:
            msg = f"Unable to read address book from {self._database_url}"
            raise RepositoryError(msg) from exc
        except ValueError as exc:
            # Payload columns that are not valid JSON fail while rows are fetched.
            msg = f"Stored address book in {self._database_url} is not valid JSON"
            raise DataLoadingError(msg) from exc

        try:
            return AddressBook.model_validate({"persons": payloads})
        except ValidationError as exc:
            msg = f"Stored address book in {self._database_url} is invalid"
            raise DataLoadingError(msg) from exc

    async def save(self, book: AddressBook) -> None:
        try:
            await _ensure_migrated(self._engine, self._database_url)
            async with self._session_factory() as session, session.begin():
                await session.execute(delete(PersonRecord))
                for position, person in enumerate(book.persons):
                    session.add(
                        PersonRecord(
                            position=position,
                            name=person.name,
                            payload=person.model_dump(mode="json"),
                        )
                    )
                snapshot = await session.get(SnapshotRecord, _SNAPSHOT_ID)
                if snapshot is None:
                    snapshot = SnapshotRecord(id=_SNAPSHOT_ID, saved_at=_now())
                    session.add(snapshot)
                snapshot.saved_at = _now()
        except SQLAlchemyError as exc:
            msg = f"Unable to write address book to {self._database_url}"
            raise RepositoryError(msg) from exc


def _now() -> datetime:
    return datetime.now(UTC)


def create_sqlite_storage(database_url: str) -> SQLiteAddressBookStorage:
    # CLI commands each run their own event loop; pooled connections cannot cross loops.
    engine = create_async_engine(database_url, future=True, poolclass=NullPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    return SQLiteAddressBookStorage(engine, session_factory, database_url)


__all__ = ["SQLiteAddressBookStorage", "create_sqlite_storage"]
