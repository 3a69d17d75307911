import sys
from pathlib import Path

import typer
from loguru import logger

from motash import __version__
from motash.cli.commands import check, export, notifiers


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()

    file_path = log_file or Path("motash.log")
    logger.add(
        file_path,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )


app = typer.Typer(
    name="motash",
    help="Motash - audits scheduled tasks and reports the ones that failed",
    no_args_is_help=True,
)

app.command(name="check")(check.check_tasks)
app.command(name="notifiers")(notifiers.list_notifiers)
app.command(name="export")(export.export_tasks)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"motash {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Log file path"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Motash - audits scheduled tasks and reports the ones that failed."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
