"""Record commands - one-shot operations against the vault."""

from pathlib import Path

from rich.prompt import Confirm

from vault.cli.commands import actions
from vault.cli.console import get_console
from vault.cli.runner import run
from vault.domain.record.query.search import SortField


def add(name: str, value: str) -> None:
    """Add a record.

    Args:
        name: Record name (must not be blank).
        value: Record value.
    """
    run(lambda service, _: actions.add_record(service, get_console(), name, value))


def list_records() -> None:
    """List all records."""
    run(lambda service, _: actions.list_records(service, get_console()))


def update(id: int, name: str, value: str) -> None:
    """Overwrite a record's name and value.

    Args:
        id: Record ID.
        name: New name.
        value: New value.
    """
    run(lambda service, _: actions.update_record(service, get_console(), id, name, value))


def delete(id: int) -> None:
    """Delete a record.

    Args:
        id: Record ID.
    """
    run(lambda service, _: actions.delete_record(service, get_console(), id))


def search(keyword: str) -> None:
    """Find records by name or ID.

    Args:
        keyword: Case-insensitive text matched against names and IDs.
    """
    run(lambda service, _: actions.search(service, get_console(), keyword))


def sort(by: SortField = SortField.NAME, desc: bool = False) -> None:
    """List records in order.

    Args:
        by: Field to sort by.
        desc: Sort descending.
    """
    run(lambda service, _: actions.sort(service, get_console(), by, desc))


def export(path: Path | None = None) -> None:
    """Export all records to a text file.

    Args:
        path: Output file (defaults to the configured export path).
    """
    run(
        lambda service, config: actions.export(
            service, get_console(), path or config.export.path
        )
    )


def stats() -> None:
    """Show vault statistics."""
    run(lambda service, _: actions.statistics(service, get_console()))


def clear(yes: bool = False) -> None:
    """Remove every record (no backup is written).

    Args:
        yes: Skip the confirmation prompt.
    """
    if not yes and not Confirm.ask("Remove ALL records?", default=False):
        get_console().info("Aborted")
        return
    run(lambda service, _: actions.clear(service, get_console()))
