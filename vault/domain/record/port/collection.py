"""RecordCollection port - the key-based document store behind the repository."""

from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol

from vault.domain.record.model.value import RecordId

Document = dict[str, Any]


class RecordCollection(Protocol):
    """Collection-style store keyed on the integer ``id`` field.

    Implementations must make find_one_and_update and find_one_and_delete
    single atomic operations against the store.
    """

    @abstractmethod
    async def insert_one(self, document: Document) -> None: ...

    @abstractmethod
    async def find_all(self) -> list[Document]: ...

    @abstractmethod
    async def find_one_and_update(
        self,
        id: RecordId,
        name: str,
        value: str,
        updated_at: datetime,
    ) -> Document | None:
        """Overwrite name/value/updated_at and return the post-update document."""
        ...

    @abstractmethod
    async def find_one_and_delete(self, id: RecordId) -> Document | None:
        """Remove the document and return it as it was before removal."""
        ...

    @abstractmethod
    async def delete_all(self) -> None: ...

    @abstractmethod
    async def max_id(self) -> int | None:
        """Highest id currently stored, or None for an empty collection."""
        ...
