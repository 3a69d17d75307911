from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from motash.cli.commands.check import DEFAULT_CONFIG_FILE, load_settings
from motash.cli.theme import theme
from motash.infrastructure.notifiers.registry import build_registry

console = Console()


def list_notifiers(
    config: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", "-c", help="Config file"),
) -> None:
    """List the registered notifiers."""
    settings = load_settings(config)
    registry = build_registry(settings)
    enabled = {n.name for n in registry.select(settings.notifiers)}

    table = Table(title="Notifiers")
    table.add_column("Name", style=theme.INFO)
    table.add_column("Type", style=theme.DIM)
    table.add_column("Enabled")

    for notifier in registry.list_all():
        table.add_row(
            notifier.name,
            type(notifier).__name__,
            "yes" if notifier.name in enabled else "no",
        )

    console.print(table)
