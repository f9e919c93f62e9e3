"""Menu command - the interactive numbered menu."""

from pathlib import Path

from rich.prompt import IntPrompt, Prompt

from vault.cli.commands import actions
from vault.cli.console import Console, get_console
from vault.cli.runner import run
from vault.config import Config
from vault.domain.record.query.search import SortField
from vault.domain.record.service.vault import VaultService
from vault.domain.shared.error import ValidationError

MENU = """
===== Record Vault =====
1. Add Record
2. List Records
3. Update Record
4. Delete Record
5. Search Records
6. Sort Records
7. Export Data
8. View Vault Statistics
9. Exit
========================"""

EXIT_CHOICE = "9"


async def _dispatch(choice: str, service: VaultService, console: Console, config: Config) -> None:
    ask = console.rich
    match choice:
        case "1":
            name = Prompt.ask("Enter name", console=ask)
            value = Prompt.ask("Enter value", console=ask)
            await actions.add_record(service, console, name, value)
        case "2":
            await actions.list_records(service, console)
        case "3":
            id = IntPrompt.ask("Enter record ID to update", console=ask)
            name = Prompt.ask("New name", console=ask)
            value = Prompt.ask("New value", console=ask)
            await actions.update_record(service, console, id, name, value)
        case "4":
            id = IntPrompt.ask("Enter record ID to delete", console=ask)
            await actions.delete_record(service, console, id)
        case "5":
            keyword = Prompt.ask("Enter search keyword", console=ask, default="")
            await actions.search(service, console, keyword)
        case "6":
            field = Prompt.ask(
                "Sort by (1 = Name, 2 = Creation Date)", choices=["1", "2"], console=ask
            )
            order = Prompt.ask(
                "Order (1 = Ascending, 2 = Descending)", choices=["1", "2"], console=ask
            )
            sort_field = SortField.CREATED_AT if field == "2" else SortField.NAME
            await actions.sort(service, console, sort_field, descending=order == "2")
        case "7":
            await actions.export(service, console, Path(config.export.path))
        case "8":
            await actions.statistics(service, console)
        case _:
            console.warning("Invalid option.")


async def _loop(service: VaultService, config: Config) -> None:
    console = get_console()
    while True:
        console.print(MENU)
        choice = Prompt.ask("Choose option", console=console.rich).strip()
        if choice == EXIT_CHOICE:
            console.info("Exiting Record Vault...")
            return
        try:
            await _dispatch(choice, service, console, config)
        except ValidationError as e:
            console.error(e.message)


def menu() -> None:
    """Interactive menu (loops until Exit)."""
    run(_loop)
