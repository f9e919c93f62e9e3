"""Search and sort over a record listing."""

from enum import Enum
from typing import Iterable

from vault.domain.record.model.aggregate import Record


class SortField(str, Enum):
    NAME = "name"
    CREATED_AT = "created_at"


def search_records(records: Iterable[Record], keyword: str) -> list[Record]:
    """Records whose name contains ``keyword`` or whose id matches it.

    Matching is case-insensitive. A numeric keyword also matches an id
    containing its digits. A blank keyword matches every record.
    """
    term = keyword.strip().lower()
    if not term:
        return list(records)

    numeric = int(term) if term.lstrip("-").isdigit() else None

    def matches(record: Record) -> bool:
        if term in record.name.lower():
            return True
        return term in str(record.id) or record.id == numeric

    return [r for r in records if matches(r)]


def sort_records(
    records: Iterable[Record],
    field: SortField = SortField.NAME,
    descending: bool = False,
) -> list[Record]:
    """A new list ordered by name (case-insensitive) or creation time."""
    if field is SortField.CREATED_AT:
        return sorted(records, key=lambda r: r.created_at, reverse=descending)
    return sorted(records, key=lambda r: r.name.lower(), reverse=descending)
