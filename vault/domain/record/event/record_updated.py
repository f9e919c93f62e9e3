"""RecordUpdated event - emitted after a record's name/value are overwritten."""

from vault.domain.record.model.aggregate import Record
from vault.domain.shared.event import Event


class RecordUpdated(Event):
    """Carries the post-update record, not a diff."""

    record: Record
