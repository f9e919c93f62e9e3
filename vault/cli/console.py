"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any, Sequence

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vault.domain.record.model.aggregate import Record
from vault.domain.record.query.statistics import VaultStatistics


def _format_date(value: Any, *, with_time: bool = False) -> str:
    if value is None:
        return "N/A"
    if with_time:
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value.date().isoformat()


class Console:
    """CLI output manager wrapping rich.

    Provides consistent formatting for success/error messages, record
    tables and the statistics view.
    """

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None).
            quiet: Suppress non-essential output.
        """
        self._console = RichConsole(
            force_terminal=force_terminal,
            stderr=False,
        )
        self._err_console = RichConsole(
            force_terminal=force_terminal,
            stderr=True,
        )
        self._quiet = quiet

    @property
    def rich(self) -> RichConsole:
        """Underlying rich console, for prompts."""
        return self._console

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def records(
        self,
        records: Sequence[Record],
        *,
        title: str | None = None,
        numbered: bool = False,
        empty_message: str = "No records found.",
    ) -> None:
        """Print records as a table."""
        if not records:
            self.warning(empty_message)
            return

        table = Table(title=title, show_header=True, header_style="bold")
        if numbered:
            table.add_column("#", style="dim", width=3)
        for header in ("ID", "Name", "Value", "Created", "Updated"):
            table.add_column(header)

        for i, record in enumerate(records, 1):
            values = [
                str(record.id),
                escape(record.name),
                escape(record.value),
                _format_date(record.created_at, with_time=True),
                _format_date(record.updated_at, with_time=True),
            ]
            if numbered:
                table.add_row(str(i), *values)
            else:
                table.add_row(*values)

        self._console.print(table)

    def statistics(self, stats: VaultStatistics) -> None:
        """Print the vault statistics panel."""
        if stats.total_records == 0:
            content = "Total Records: 0\n[dim]No data available for further statistics.[/dim]"
        else:
            content = "\n".join(
                [
                    f"Total Records: {stats.total_records}",
                    f"Last Modified: {_format_date(stats.last_modified, with_time=True)}",
                    f"Longest Name: {escape(stats.longest_name or '')} "
                    f"({stats.longest_name_length} characters)",
                    f"Earliest Record: {_format_date(stats.earliest_created)}",
                    f"Latest Record: {_format_date(stats.latest_created)}",
                ]
            )
        self._console.print(Panel(content, title="Vault Statistics", border_style="blue"))


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
