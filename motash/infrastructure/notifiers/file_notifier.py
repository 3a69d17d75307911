from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from loguru import logger

from motash.domain.entities.failure import Failure
from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.services.failure_formatter import failures_as_text
from motash.domain.value_objects.audit_settings import DEFAULT_FAILURE_FORMAT
from motash.domain.value_objects.timestamps import format_report_timestamp


class FileNotifier(NotifierPort):
    """Appends the failure report to a text file."""

    name = "file"

    def __init__(self, path: Path, template: str = DEFAULT_FAILURE_FORMAT) -> None:
        self.path = path
        self.template = template

    def send(self, failures: Sequence[Failure]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        header = f"# Audit at {format_report_timestamp(datetime.now())}: {len(failures)} problems\n"
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(header)
            f.write(failures_as_text(failures, self.template))
        logger.debug("Appended {} failures to {}", len(failures), self.path)
