from datetime import datetime

from loguru import logger

from motash.domain.entities.audit_state import AuditState
from motash.domain.entities.failure import Failure
from motash.domain.ports.scheduler_port import TaskView
from motash.domain.services.result_code_parser import ResultCodeParser
from motash.domain.value_objects.marker_codes import APP_ERROR_ID
from motash.domain.value_objects.run_state import is_skipped_state
from motash.domain.value_objects.timestamps import to_local_naive

UNREADABLE_TASK_NAME = "<unreadable task>"


class TaskEvaluator:
    """Decides whether one task run is a failure."""

    def __init__(self, parser: ResultCodeParser | None = None) -> None:
        self._parser = parser or ResultCodeParser()

    def evaluate(self, task: TaskView, state: AuditState) -> Failure | None:
        """Apply the pass/fail rule to ``task``.

        Rules, in order: disabled and running tasks are skipped, runs older
        than the watermark are skipped, otherwise the last result must be in
        the task's allowed result set.

        An error while reading the task does not propagate. It is logged and
        reported as a failure for this task built from the fields read so far.
        """
        fields: dict[str, object] = {}
        try:
            fields["name"] = task.name
            fields["path"] = task.path

            run_state = task.state
            if is_skipped_state(run_state):
                return None

            last_run = task.last_run
            # never ran, or already seen by a previous audit
            if last_run is None:
                return None
            last_run = to_local_naive(last_run)
            if last_run < to_local_naive(state.last_check):
                return None
            fields["last_run"] = last_run

            last_result = task.last_result
            fields["result"] = last_result

            allowed = self._parser.parse(task.description)
            if last_result in allowed:
                return None

            logger.debug(
                "Task {} returned {}, allowed {}",
                fields["path"],
                last_result,
                sorted(allowed),
            )
            return Failure(
                name=str(fields["name"]),
                path=str(fields["path"]),
                last_run=last_run,
                result=last_result,
            )
        except Exception:
            logger.exception("Failed to evaluate task {}", fields.get("path", UNREADABLE_TASK_NAME))
            return self._partial_failure(fields)

    def _partial_failure(self, fields: dict[str, object]) -> Failure:
        last_run = fields.get("last_run")
        result = fields.get("result")
        return Failure(
            name=str(fields.get("name", UNREADABLE_TASK_NAME)),
            path=str(fields.get("path", "")),
            last_run=last_run if isinstance(last_run, datetime) else datetime.now(),
            result=result if isinstance(result, int) else APP_ERROR_ID,
        )
