from loguru import logger

from motash.application.notification_dispatcher import NotificationDispatcher
from motash.domain.entities.audit_state import AuditState
from motash.domain.entities.failure import Failure
from motash.domain.ports.environment_port import EnvironmentPort
from motash.domain.ports.scheduler_port import FolderView, SchedulerSourcePort
from motash.domain.services.folder_walker import FolderWalker
from motash.domain.services.task_evaluator import TaskEvaluator

UNSUPPORTED_PLATFORM_MESSAGE = "Windows Vista or newer is required"
SERVICE_NOT_RUNNING_MESSAGE = "The Task Scheduler service is not running"
NO_PATTERN_MESSAGE = "No RootFolderPattern set, check your config file."


class AuditEngine:
    """Runs one audit pass over the scheduler and collects the failures.

    A pass is sequential and runs to completion. Precondition problems stop
    it before the scheduler is opened; an exception during the walk is
    recorded as a single failure and never propagates.
    """

    def __init__(
        self,
        source: SchedulerSourcePort,
        environment: EnvironmentPort,
        state: AuditState,
        evaluator: TaskEvaluator | None = None,
        walker: FolderWalker | None = None,
        dispatcher: NotificationDispatcher | None = None,
    ) -> None:
        self.source = source
        self.environment = environment
        self.state = state
        self.evaluator = evaluator or TaskEvaluator()
        self.walker = walker or FolderWalker()
        self.dispatcher = dispatcher
        self._failures: list[Failure] = []
        self._walk_completed = False

    @property
    def failures(self) -> list[Failure]:
        """Failures of the last audit pass."""
        return list(self._failures)

    @property
    def walk_completed(self) -> bool:
        """True if the last pass visited every selected folder without an exception."""
        return self._walk_completed

    @property
    def setup_problem(self) -> bool:
        """True if the last pass stopped on a precondition."""
        return self.state.setup_problem

    def run_audit(self) -> tuple[list[Failure], int]:
        self._failures = []
        self._walk_completed = False
        self.state.setup_problem = False

        if not self.environment.platform_supported():
            return self._set_problem(UNSUPPORTED_PLATFORM_MESSAGE)
        if not self.environment.scheduler_service_running():
            return self._set_problem(SERVICE_NOT_RUNNING_MESSAGE)
        if not self.state.root_folder_pattern:
            return self._set_problem(NO_PATTERN_MESSAGE)

        try:
            with self.source.connect() as root:
                if self.state.check_root_tasks:
                    self._check_tasks(root)

                for folder in self.walker.walk(root, self.state.root_folder_pattern):
                    self._check_tasks(folder)
            self._walk_completed = True
        except Exception as e:
            logger.exception("Audit aborted: {}", e)
            self._failures.append(Failure.application_exception(e))

        logger.info("Audit finished with {} problems", len(self._failures))
        return self.failures, len(self._failures)

    def check(self) -> int:
        """Run an audit pass and return the number of problems found."""
        _, count = self.run_audit()
        return count

    def notify(self) -> int:
        """Send the current failures to the notifiers.

        Returns the number of notifiers that ran, 0 if there is nothing to report.
        """
        if self.dispatcher is None or not self._failures:
            return 0
        return self.dispatcher.dispatch(self.failures)

    def _check_tasks(self, folder: FolderView) -> None:
        for task in folder.tasks:
            failure = self.evaluator.evaluate(task, self.state)
            if failure is not None:
                self._failures.append(failure)

    def _set_problem(self, problem: str) -> tuple[list[Failure], int]:
        logger.warning("Setup problem: {}", problem)
        self.state.setup_problem = True
        self._failures.append(Failure.setup_problem(problem))
        return self.failures, 1
