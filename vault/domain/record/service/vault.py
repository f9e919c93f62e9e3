"""VaultService - orchestrates record mutations, events and snapshots."""

import asyncio
import logging
from pathlib import Path

from vault.domain.record.event import RecordAdded, RecordDeleted, RecordUpdated
from vault.domain.record.model.aggregate import Record
from vault.domain.record.model.value import RecordId
from vault.domain.record.port.snapshotter import Snapshotter
from vault.domain.record.service.repository import RecordRepository
from vault.domain.shared.port.event_bus import EventBus
from vault.domain.shared.service import Service

logger = logging.getLogger(__name__)


class VaultService(Service):
    """Entry point for every caller that changes or reads the vault.

    A mutation runs against the repository first; only a successful one
    publishes its event. Creates and deletes then write a snapshot of the
    full, freshly read listing. That makes each structural change cost a
    full re-serialization of the vault. Updates never snapshot.

    Any failure while taking the snapshot, including the re-read of the
    listing, is logged and swallowed here: the mutation has already
    committed and its result is returned regardless.
    """

    repository: RecordRepository
    event_bus: EventBus
    snapshotter: Snapshotter

    async def add_record(self, name: str, value: str) -> Record:
        """Create a record, publish RecordAdded and snapshot the vault.

        Raises:
            ValidationError: If name is blank or value is missing.
            StorageUnavailableError: If the store cannot be reached.
        """
        record = await self.repository.create(name, value)
        await self.event_bus.publish(RecordAdded(record=record))
        await self._snapshot()
        return record

    async def list_records(self) -> list[Record]:
        return await self.repository.list()

    async def update_record(self, id: RecordId, name: str, value: str) -> Record | None:
        """Overwrite a record's name/value. Returns None if no such record."""
        record = await self.repository.update(id, name, value)
        if record is None:
            return None
        await self.event_bus.publish(RecordUpdated(record=record))
        return record

    async def delete_record(self, id: RecordId) -> Record | None:
        """Remove a record and snapshot the vault. Returns None if no such record."""
        record = await self.repository.delete(id)
        if record is None:
            return None
        await self.event_bus.publish(RecordDeleted(record=record))
        await self._snapshot()
        return record

    async def clear_records(self) -> None:
        await self.repository.clear()

    async def _snapshot(self) -> Path | None:
        try:
            records = await self.repository.list()
            return await asyncio.to_thread(self.snapshotter.snapshot, records)
        except Exception:
            # The mutation has already committed
            logger.exception("Failed to create backup")
            return None
