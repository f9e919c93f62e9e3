"""Summary statistics over a record listing."""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from vault.domain.record.model.aggregate import Record


@dataclass(frozen=True)
class VaultStatistics:
    """Aggregate view of the vault; all optional fields are None when empty."""

    total_records: int
    last_modified: datetime | None = None
    longest_name: str | None = None
    earliest_created: datetime | None = None
    latest_created: datetime | None = None

    @property
    def longest_name_length(self) -> int:
        return len(self.longest_name) if self.longest_name is not None else 0


def compute_statistics(records: Sequence[Record]) -> VaultStatistics:
    if not records:
        return VaultStatistics(total_records=0)

    # First record wins on ties
    longest = records[0]
    for record in records:
        if len(record.name) > len(longest.name):
            longest = record

    created = [r.created_at for r in records]
    return VaultStatistics(
        total_records=len(records),
        last_modified=max(r.last_modified for r in records),
        longest_name=longest.name,
        earliest_created=min(created),
        latest_created=max(created),
    )
