from datetime import datetime
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from motash.application.audit_engine import AuditEngine
from motash.application.notification_dispatcher import NotificationDispatcher
from motash.cli.formatters.failure_formatter import format_failures
from motash.cli.theme import theme
from motash.domain.entities.audit_state import AuditState
from motash.domain.ports.environment_port import EnvironmentPort
from motash.domain.ports.scheduler_port import SchedulerSourcePort
from motash.domain.value_objects.audit_settings import AuditSettings
from motash.infrastructure.config.json_config_source import ConfigError, JsonConfigSource
from motash.infrastructure.config.settings_loader import load_audit_settings
from motash.infrastructure.environment.host_environment import (
    StaticEnvironment,
    WindowsEnvironment,
)
from motash.infrastructure.notifiers.console_notifier import ConsoleNotifier
from motash.infrastructure.notifiers.registry import build_registry
from motash.infrastructure.persistence.state_store import JsonStateStore, StateFileError
from motash.infrastructure.scheduler.snapshot_source import SnapshotSchedulerSource
from motash.infrastructure.scheduler.windows_source import WindowsSchedulerSource

console = Console()

DEFAULT_CONFIG_FILE = Path("motash.json")

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_SETUP_PROBLEM = 2


def load_settings(config: Path) -> AuditSettings:
    try:
        return load_audit_settings(JsonConfigSource(config))
    except ConfigError as e:
        console.print(f"[{theme.ERROR_BOLD}]Invalid configuration:[/] {e}")
        raise typer.Exit(EXIT_SETUP_PROBLEM) from None


def load_watermark(store: JsonStateStore) -> datetime | None:
    try:
        return store.load_last_check()
    except StateFileError as e:
        console.print(f"[{theme.ERROR_BOLD}]Invalid state file:[/] {e}")
        raise typer.Exit(EXIT_SETUP_PROBLEM) from None


def build_source(snapshot: Path | None) -> tuple[SchedulerSourcePort, EnvironmentPort]:
    if snapshot is not None:
        return SnapshotSchedulerSource(snapshot), StaticEnvironment()
    return WindowsSchedulerSource(), WindowsEnvironment()


def check_tasks(
    config: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", "-c", help="Config file"),
    snapshot: Path | None = typer.Option(
        None, "--snapshot", help="Audit a JSON snapshot instead of the local scheduler"
    ),
    since: datetime | None = typer.Option(
        None,
        "--since",
        help="Watermark override: ignore runs before this time",
        formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"],
    ),
    state_file: Path | None = typer.Option(None, "--state-file", help="Watermark state file"),
    notify: bool = typer.Option(True, "--notify/--no-notify", help="Run the notifiers"),
    update_watermark: bool = typer.Option(
        True,
        "--update-watermark/--no-update-watermark",
        help="Store this audit's start time as the next watermark",
    ),
) -> None:
    """Audit scheduled tasks and report the ones that failed."""
    settings = load_settings(config)
    store = JsonStateStore(state_file or Path(settings.state_file))

    last_check = since or load_watermark(store)
    source, environment = build_source(snapshot)

    dispatcher = None
    if notify:
        registry = build_registry(settings)
        dispatcher = NotificationDispatcher(registry.select(settings.notifiers))

    engine = AuditEngine(
        source=source,
        environment=environment,
        state=AuditState.from_settings(settings, last_check),
        dispatcher=dispatcher,
    )

    started = datetime.now()
    problems = engine.check()
    # the console notifier prints the table itself
    show_table = dispatcher is None or not any(
        isinstance(n, ConsoleNotifier) for n in dispatcher.notifiers
    )
    format_failures(console, engine.failures, engine.setup_problem, show_table=show_table)

    notified = engine.notify()
    if notified:
        console.print(f"[{theme.DIM}]Notified {notified} channels[/]")

    if update_watermark and engine.walk_completed:
        store.save_last_check(started)
    else:
        logger.debug("Watermark not advanced")

    if engine.setup_problem:
        raise typer.Exit(EXIT_SETUP_PROBLEM)
    if problems:
        raise typer.Exit(EXIT_FAILURES)
