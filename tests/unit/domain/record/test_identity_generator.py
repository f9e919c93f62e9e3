"""Unit tests for IdentityGenerator."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from vault.domain.record.port.collection import RecordCollection
from vault.domain.record.service.identity import IdentityGenerator


def _collection(max_id: int | None) -> RecordCollection:
    collection = MagicMock(spec=RecordCollection)
    collection.max_id = AsyncMock(return_value=max_id)
    return collection


class TestIdentityGenerator:
    @pytest.mark.asyncio
    async def test_empty_store_starts_at_one(self):
        ids = IdentityGenerator(_collection(None))

        assert await ids.next_id() == 1
        assert await ids.next_id() == 2

    @pytest.mark.asyncio
    async def test_seeds_from_existing_high_water_mark(self):
        """A restarted process must not hand out ids of existing records."""
        ids = IdentityGenerator(_collection(41))

        assert await ids.next_id() == 42

    @pytest.mark.asyncio
    async def test_store_is_read_only_once(self):
        collection = _collection(3)
        ids = IdentityGenerator(collection)

        for _ in range(5):
            await ids.next_id()

        collection.max_id.assert_awaited_once()
