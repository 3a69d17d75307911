from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from motash.cli.theme import theme
from motash.domain.entities.failure import Failure
from motash.infrastructure.notifiers.console_notifier import build_failure_table


def format_failures(
    console: Console,
    failures: Sequence[Failure],
    setup_problem: bool,
    show_table: bool = True,
) -> None:
    """Print the audit outcome.

    ``show_table`` is False when the console notifier will print the table.
    """
    if not failures:
        console.print(f"[{theme.SUCCESS_BOLD}]No problems found[/]")
        return

    if setup_problem:
        console.print(f"[{theme.WARNING_BOLD}]Audit could not run:[/] {escape(failures[0].path)}")
        return

    if show_table:
        console.print(build_failure_table(failures))
