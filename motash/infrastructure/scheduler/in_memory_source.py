from collections.abc import Iterator
from contextlib import contextmanager

from motash.domain.entities.task_record import TaskFolder
from motash.domain.ports.scheduler_port import FolderView, SchedulerSourcePort


class InMemorySchedulerSource(SchedulerSourcePort):
    """Scheduler source backed by a folder tree held in memory."""

    def __init__(self, root: TaskFolder) -> None:
        self.root = root

    @contextmanager
    def connect(self) -> Iterator[FolderView]:
        yield self.root
