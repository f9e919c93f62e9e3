"""RecordAdded event - emitted after a record is inserted."""

from vault.domain.record.model.aggregate import Record
from vault.domain.shared.event import Event


class RecordAdded(Event):
    """Carries the record exactly as it was stored."""

    record: Record
