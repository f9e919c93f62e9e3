"""SQL implementation of the RecordCollection port."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import case, delete, func, insert, literal, select, update
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from vault.domain.record.model.value import RecordId
from vault.domain.record.port.collection import Document, RecordCollection
from vault.domain.shared.error import StorageUnavailableError
from vault.infrastructure.persistence.tables import records_table

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def row_to_document(row: Any) -> Document:
    data = dict(row)
    data["created_at"] = _as_utc(data["created_at"])
    data["updated_at"] = _as_utc(data.get("updated_at"))
    return data


class SqlRecordCollection(RecordCollection):
    """Record collection backed by the ``records`` table.

    Each call runs in its own transaction. Update and delete by id are
    single ``RETURNING`` statements, so no other caller can interleave
    between the lookup and the write.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncConnection]:
        try:
            async with self.engine.begin() as conn:
                yield conn
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Record store unavailable: {e}")
            raise StorageUnavailableError(f"Record store unavailable: {e.orig}") from e

    async def insert_one(self, document: Document) -> None:
        async with self._transaction() as conn:
            await conn.execute(insert(records_table).values(**document))

    async def find_all(self) -> list[Document]:
        async with self._transaction() as conn:
            result = await conn.execute(select(records_table))
            return [row_to_document(row) for row in result.mappings()]

    async def find_one_and_update(
        self,
        id: RecordId,
        name: str,
        value: str,
        updated_at: datetime,
    ) -> Document | None:
        # updated_at never falls behind created_at, even if the clock stepped back
        stamp = literal(updated_at, records_table.c.updated_at.type)
        stmt = (
            update(records_table)
            .where(records_table.c.id == id)
            .values(
                name=name,
                value=value,
                updated_at=case(
                    (records_table.c.created_at > stamp, records_table.c.created_at),
                    else_=stamp,
                ),
            )
            .returning(*records_table.c)
        )
        async with self._transaction() as conn:
            row = (await conn.execute(stmt)).mappings().first()
            return row_to_document(row) if row else None

    async def find_one_and_delete(self, id: RecordId) -> Document | None:
        stmt = (
            delete(records_table)
            .where(records_table.c.id == id)
            .returning(*records_table.c)
        )
        async with self._transaction() as conn:
            row = (await conn.execute(stmt)).mappings().first()
            return row_to_document(row) if row else None

    async def delete_all(self) -> None:
        async with self._transaction() as conn:
            await conn.execute(delete(records_table))

    async def max_id(self) -> int | None:
        async with self._transaction() as conn:
            result = await conn.execute(select(func.max(records_table.c.id)))
            return result.scalar_one_or_none()
