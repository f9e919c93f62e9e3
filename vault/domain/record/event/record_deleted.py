"""RecordDeleted event - emitted after a record is removed."""

from vault.domain.record.model.aggregate import Record
from vault.domain.shared.event import Event


class RecordDeleted(Event):
    """Carries the record as it was immediately before removal."""

    record: Record
