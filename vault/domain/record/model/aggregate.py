"""Record - the single persisted entity of the vault."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vault.domain.record.model.value import RecordId


class Record(BaseModel):
    """A named key/value entry with identity and timestamps.

    ``id`` and ``created_at`` never change after creation; ``updated_at``
    stays unset until the first successful update.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: RecordId
    name: str
    value: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> "Record":
        if self.updated_at is not None and self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")
        return self

    @property
    def last_modified(self) -> datetime:
        """Most recent of creation and update time."""
        if self.updated_at is not None and self.updated_at > self.created_at:
            return self.updated_at
        return self.created_at

    def to_document(self) -> dict[str, Any]:
        """Serialize to the snapshot document shape (camelCase, ISO timestamps)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
