"""Terminal output for reports, confirmations and errors."""
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from models import LedgerError, ReportRow, StartResult, StopResult
from utils.time_utils import format_duration, format_instant


def build_table(rows: List[ReportRow]) -> Table:
    """
    Build a table with one line per report row.

    Args:
        rows: Rows from the reporter

    Returns:
        Table with Task, Days, Hours, Minutes and Seconds columns
    """
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    task_header, *unit_headers = ReportRow.HEADERS
    table.add_column(task_header, justify="left", no_wrap=True)
    for header in unit_headers:
        table.add_column(header, justify="right")

    for row in rows:
        table.add_row(*row.cells())

    return table


class TableRenderer:
    """Print command results to the terminal."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def print_rows(self, rows: List[ReportRow], empty_message: str) -> None:
        """Print rows as a table, or a dim message if there are none."""
        if not rows:
            self.console.print(f"[dim]{empty_message}[/dim]")
            return
        self.console.print(build_table(rows))

    def print_start(self, result: StartResult) -> None:
        """Print one line per started task, or the batch error."""
        if not result.ok:
            self.print_error(result.error)
            return
        for task in result.started:
            self.console.print(
                f"Starting task [bold]`{escape(task.name)}`[/bold] at {format_instant(task.started_at)}"
            )

    def print_stop(self, result: StopResult) -> None:
        """Print one line per stopped task, or the batch error."""
        if not result.ok:
            self.print_error(result.error)
            return
        for task in result.stopped:
            self.console.print(
                f"Stopped task [bold]`{escape(task.name)}`[/bold] after {format_duration(task.elapsed)}"
            )

    def print_error(self, error) -> None:
        """Print an error line naming the affected tasks."""
        message = error.message if isinstance(error, LedgerError) else str(error)
        self.error_console.print(f"[red]Error:[/red] {escape(message)}")

    def print_notice(self, message: str) -> None:
        """Print an informational line."""
        self.console.print(f"[dim]{escape(message)}[/dim]")
