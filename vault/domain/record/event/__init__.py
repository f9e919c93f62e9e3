from vault.domain.record.event.record_added import RecordAdded
from vault.domain.record.event.record_deleted import RecordDeleted
from vault.domain.record.event.record_updated import RecordUpdated

RECORD_EVENTS: tuple[type[RecordAdded | RecordUpdated | RecordDeleted], ...] = (
    RecordAdded,
    RecordUpdated,
    RecordDeleted,
)

__all__ = ["RECORD_EVENTS", "RecordAdded", "RecordDeleted", "RecordUpdated"]
