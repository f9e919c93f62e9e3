"""RecordRepository - record lifecycle on top of the backing collection."""

import logging
from datetime import UTC, datetime

from vault.domain.record.model.aggregate import Record
from vault.domain.record.model.value import RecordId
from vault.domain.record.port.collection import Document, RecordCollection
from vault.domain.record.service.identity import IdentityGenerator
from vault.domain.shared.error import ValidationError
from vault.domain.shared.service import Service

logger = logging.getLogger(__name__)


def validate_record(name: str | None, value: str | None) -> None:
    """Reject an empty (after trimming) name or a missing value.

    Raises:
        ValidationError: If either field is unusable.
    """
    if name is None or not name.strip():
        raise ValidationError("Record name must not be empty", field="name")
    if value is None:
        raise ValidationError("Record value is required", field="value")


def document_to_record(document: Document) -> Record:
    return Record(
        id=RecordId(document["id"]),
        name=document["name"],
        value=document["value"],
        created_at=document["created_at"],
        updated_at=document.get("updated_at"),
    )


def record_to_document(record: Record) -> Document:
    return {
        "id": record.id,
        "name": record.name,
        "value": record.value,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }


class RecordRepository(Service):
    """The only component that reads or writes the record collection.

    Every mutation is a single collection call, so a change is either
    fully visible to later reads or not at all. Absent ids yield None.
    """

    collection: RecordCollection
    ids: IdentityGenerator

    async def create(self, name: str, value: str) -> Record:
        """Validate, assign an id, stamp created_at and insert.

        Raises:
            ValidationError: If name is blank or value is missing.
            StorageUnavailableError: If the store cannot be reached.
        """
        validate_record(name, value)

        record = Record(
            id=await self.ids.next_id(),
            name=name,
            value=value,
            created_at=datetime.now(UTC),
        )
        await self.collection.insert_one(record_to_document(record))
        logger.debug(f"Record inserted: {record.id}")
        return record

    async def list(self) -> list[Record]:
        """All live records, in no particular order."""
        return [document_to_record(doc) for doc in await self.collection.find_all()]

    async def update(self, id: RecordId, name: str, value: str) -> Record | None:
        """Overwrite name/value and stamp updated_at in one atomic call.

        Raises:
            ValidationError: If the new name is blank or value is missing.
        """
        validate_record(name, value)
        document = await self.collection.find_one_and_update(
            id, name, value, datetime.now(UTC)
        )
        if document is None:
            logger.debug(f"Update skipped, no record {id}")
            return None
        return document_to_record(document)

    async def delete(self, id: RecordId) -> Record | None:
        document = await self.collection.find_one_and_delete(id)
        if document is None:
            logger.debug(f"Delete skipped, no record {id}")
            return None
        return document_to_record(document)

    async def clear(self) -> None:
        """Remove every record. Maintenance and test use only."""
        await self.collection.delete_all()
        logger.info("All records cleared")
