from collections.abc import Sequence

from loguru import logger

from motash.domain.entities.failure import Failure
from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.services.failure_formatter import failures_as_text
from motash.domain.value_objects.audit_settings import DEFAULT_FAILURE_FORMAT


class LogNotifier(NotifierPort):
    """Writes the failure report to the application log."""

    name = "log"

    def __init__(self, template: str = DEFAULT_FAILURE_FORMAT) -> None:
        self.template = template

    def send(self, failures: Sequence[Failure]) -> None:
        logger.warning(
            "{} scheduled task problems:\n{}",
            len(failures),
            failures_as_text(failures, self.template).rstrip("\n"),
        )
