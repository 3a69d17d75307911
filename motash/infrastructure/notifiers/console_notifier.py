from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from motash.cli.theme import theme
from motash.domain.entities.failure import Failure
from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.value_objects.timestamps import format_report_timestamp


def build_failure_table(failures: Sequence[Failure]) -> Table:
    table = Table(title=f"{len(failures)} problems found")
    table.add_column("Task", style=theme.TABLE_NAME)
    table.add_column("Path")
    table.add_column("Result", justify="right")
    table.add_column("Last run", style=theme.TABLE_SECONDARY)

    for failure in failures:
        result_style = theme.TABLE_SYNTHETIC if failure.is_synthetic else theme.TABLE_RESULT
        table.add_row(
            escape(failure.name),
            escape(failure.path),
            f"[{result_style}]{failure.result}[/]",
            format_report_timestamp(failure.last_run),
        )

    return table


class ConsoleNotifier(NotifierPort):
    """Prints the failures as a table on the terminal."""

    name = "console"

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def send(self, failures: Sequence[Failure]) -> None:
        self.console.print(build_failure_table(failures))
