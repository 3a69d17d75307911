from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from motash.cli.theme import theme
from motash.domain.entities.task_record import TaskFolder
from motash.infrastructure.scheduler.snapshot_source import write_snapshot
from motash.infrastructure.scheduler.windows_source import WindowsSchedulerSource

console = Console()


def export_tasks(
    output: Path = typer.Option(..., "--output", "-o", help="Snapshot file to write"),
) -> None:
    """Export the local Task Scheduler folder tree to a JSON snapshot."""
    try:
        with WindowsSchedulerSource().connect() as root:
            snapshot = write_snapshot(root, output)
    except ImportError:
        console.print(f"[{theme.ERROR_BOLD}]pywin32 is required:[/] pip install 'motash[windows]'")
        raise typer.Exit(1) from None
    except Exception as e:
        logger.exception("Snapshot export failed")
        console.print(f"[{theme.ERROR_BOLD}]Export failed:[/] {e}")
        raise typer.Exit(1) from None

    folders = _count_folders(snapshot)
    console.print(f"[{theme.SUCCESS}]Exported {folders} folders to {output}[/]")


def _count_folders(folder: TaskFolder) -> int:
    return 1 + sum(_count_folders(sub) for sub in folder.subfolders)
