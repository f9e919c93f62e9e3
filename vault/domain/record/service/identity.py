"""IdentityGenerator - hands out record ids that no live record holds."""

import asyncio
import logging

from vault.domain.record.model.value import RecordId
from vault.domain.record.port.collection import RecordCollection

logger = logging.getLogger(__name__)


class IdentityGenerator:
    """Process-wide counter seeded from the store's high-water mark.

    The counter is read from the collection on first use, so ids stay
    collision-free across restarts. Ids are increasing within one process;
    an id freed by deleting the highest record may be handed out again after
    a restart, which never collides with a live record.
    """

    def __init__(self, collection: RecordCollection) -> None:
        self._collection = collection
        self._last: int | None = None
        self._lock = asyncio.Lock()

    async def next_id(self) -> RecordId:
        async with self._lock:
            if self._last is None:
                self._last = await self._collection.max_id() or 0
                logger.debug(f"Identity generator seeded at {self._last}")
            self._last += 1
            return RecordId(self._last)
