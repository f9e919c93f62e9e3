"""Vault operations with console output, shared by commands and the menu."""

from datetime import datetime
from pathlib import Path

from vault.cli.console import Console
from vault.domain.record.model.value import RecordId
from vault.domain.record.query.export import render_export, write_export
from vault.domain.record.query.search import SortField, search_records, sort_records
from vault.domain.record.query.statistics import compute_statistics
from vault.domain.record.service.vault import VaultService


async def add_record(service: VaultService, console: Console, name: str, value: str) -> None:
    record = await service.add_record(name, value)
    console.success(f"Record added successfully! (ID: {record.id})")


async def list_records(service: VaultService, console: Console) -> None:
    console.records(await service.list_records())


async def update_record(
    service: VaultService, console: Console, id: int, name: str, value: str
) -> None:
    updated = await service.update_record(RecordId(id), name, value)
    if updated:
        console.success("Record updated!")
    else:
        console.error("Record not found.")


async def delete_record(service: VaultService, console: Console, id: int) -> None:
    deleted = await service.delete_record(RecordId(id))
    if deleted:
        console.success("Record deleted!")
    else:
        console.error("Record not found.")


async def search(service: VaultService, console: Console, keyword: str) -> None:
    matches = search_records(await service.list_records(), keyword)
    if matches:
        console.print(f"Found {len(matches)} matching record(s):")
    console.records(matches, numbered=True)


async def sort(
    service: VaultService, console: Console, field: SortField, descending: bool
) -> None:
    records = sort_records(await service.list_records(), field, descending)
    console.records(
        records, title="Sorted Records", numbered=True, empty_message="No records to sort."
    )


async def export(service: VaultService, console: Console, path: Path) -> None:
    records = await service.list_records()
    content = render_export(
        records, exported_at=datetime.now().astimezone(), file_name=path.name
    )
    try:
        write_export(path, content)
    except OSError as e:
        console.error(f"Could not write export: {e}")
        return
    console.success(f"Data exported successfully to {path}.")


async def statistics(service: VaultService, console: Console) -> None:
    console.statistics(compute_statistics(await service.list_records()))


async def clear(service: VaultService, console: Console) -> None:
    await service.clear_records()
    console.success("All records removed.")
