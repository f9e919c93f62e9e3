"""Plain-text export of a record listing."""

from datetime import datetime
from pathlib import Path
from typing import Sequence

from vault.domain.record.model.aggregate import Record

SEPARATOR = "--------------------------"


def format_record_line(index: int, record: Record) -> str:
    created = record.created_at.date().isoformat()
    return (
        f"{index}. ID: {record.id} | Name: {record.name} | "
        f"Value: {record.value} | Created: {created}"
    )


def render_export(
    records: Sequence[Record],
    exported_at: datetime,
    file_name: str,
) -> str:
    header = [
        "Record Vault Export",
        f"Exported At: {exported_at.isoformat()}",
        f"Total Records: {len(records)}",
        f"File Name: {file_name}",
        SEPARATOR,
    ]
    if records:
        body = [format_record_line(i, r) for i, r in enumerate(records, start=1)]
    else:
        body = ["No records available."]
    return "\n".join([*header, "", *body])


def write_export(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
