"""Main CLI application using Cyclopts.

Every command builds its own container, runs one vault operation and
disposes of the database engine before exiting.
"""

import cyclopts

from vault.cli.commands import menu, records

app = cyclopts.App(
    name="vault",
    help="Record Vault - named key/value records with automatic backups",
)

app.command(records.add, name="add")
app.command(records.list_records, name="list")
app.command(records.update, name="update")
app.command(records.delete, name="delete")
app.command(records.search, name="search")
app.command(records.sort, name="sort")
app.command(records.export, name="export")
app.command(records.stats, name="stats")
app.command(records.clear, name="clear")
app.command(menu.menu, name="menu")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
