from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Protocol

from motash.domain.value_objects.run_state import TaskRunState


class TaskView(Protocol):
    """A task as exposed by a scheduler source. Any attribute read may raise."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def state(self) -> TaskRunState: ...

    @property
    def last_run(self) -> datetime | None: ...

    @property
    def last_result(self) -> int: ...

    @property
    def description(self) -> str: ...


class FolderView(Protocol):
    """A scheduler folder."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def tasks(self) -> Iterable[TaskView]: ...

    @property
    def subfolders(self) -> Iterable["FolderView"]: ...


class SchedulerSourcePort(ABC):
    """Port for read-only access to a task scheduler."""

    @abstractmethod
    def connect(self) -> AbstractContextManager[FolderView]:
        """Open a session and yield the root folder.

        The session is released when the context exits, whether the walk
        finished or raised.
        """
