"""Logs every record lifecycle event."""

import logging

from vault.domain.record.event import RecordAdded, RecordDeleted, RecordUpdated
from vault.domain.shared.event import EventListener

logger = logging.getLogger(__name__)

RecordEvent = RecordAdded | RecordUpdated | RecordDeleted


class RecordEventLogger(EventListener[RecordEvent]):
    """Writes one log line per added, updated or deleted record."""

    async def handle(self, event: RecordEvent) -> None:
        record = event.record
        if isinstance(event, RecordAdded):
            logger.info(f"[EVENT] Record added: ID {record.id}, Name: {record.name}")
        elif isinstance(event, RecordUpdated):
            logger.info(f"[EVENT] Record updated: ID {record.id}, New Name: {record.name}")
        else:
            logger.info(f"[EVENT] Record deleted: ID {record.id}, Name: {record.name}")
