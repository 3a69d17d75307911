"""Windows Task Scheduler 2.0 through its COM API (requires pywin32)."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from loguru import logger

from motash.domain.ports.scheduler_port import FolderView, SchedulerSourcePort
from motash.domain.value_objects.run_state import TaskRunState

# TASK_STATE values of the COM API
_TASK_STATES = {
    0: TaskRunState.UNKNOWN,
    1: TaskRunState.DISABLED,
    2: TaskRunState.QUEUED,
    3: TaskRunState.READY,
    4: TaskRunState.RUNNING,
}

TASK_ENUM_HIDDEN = 1


def _to_datetime(value: Any) -> datetime:
    # COM dates come back as local wall-clock time, whatever tzinfo pywin32 attaches
    return datetime(value.year, value.month, value.day, value.hour, value.minute, value.second)


class ComTask:
    """Lazy wrapper around an ``IRegisteredTask``; every read goes to COM."""

    def __init__(self, task: Any) -> None:
        self._task = task

    @property
    def name(self) -> str:
        return str(self._task.Name)

    @property
    def path(self) -> str:
        return str(self._task.Path)

    @property
    def state(self) -> TaskRunState:
        return _TASK_STATES.get(int(self._task.State), TaskRunState.UNKNOWN)

    @property
    def last_run(self) -> datetime | None:
        return _to_datetime(self._task.LastRunTime)

    @property
    def last_result(self) -> int:
        return int(self._task.LastTaskResult)

    @property
    def description(self) -> str:
        return self._task.Definition.RegistrationInfo.Description or ""


class ComFolder:
    """Lazy wrapper around an ``ITaskFolder``."""

    def __init__(self, folder: Any) -> None:
        self._folder = folder

    @property
    def name(self) -> str:
        return str(self._folder.Name)

    @property
    def path(self) -> str:
        return str(self._folder.Path)

    @property
    def tasks(self) -> Iterator[ComTask]:
        for task in self._folder.GetTasks(TASK_ENUM_HIDDEN):
            yield ComTask(task)

    @property
    def subfolders(self) -> Iterator["ComFolder"]:
        for folder in self._folder.GetFolders(0):
            yield ComFolder(folder)


class WindowsSchedulerSource(SchedulerSourcePort):
    """Scheduler source for the local Windows Task Scheduler.

    ``service_factory`` replaces the COM ``Schedule.Service`` object; without
    it pywin32 is imported on first use and COM is initialised for the
    duration of the session.
    """

    def __init__(self, service_factory: Callable[[], Any] | None = None) -> None:
        self._service_factory = service_factory

    @contextmanager
    def connect(self) -> Iterator[FolderView]:
        with self._service() as service:
            service.Connect()
            logger.debug("Connected to the Task Scheduler service")
            yield ComFolder(service.GetFolder("\\"))

    @contextmanager
    def _service(self) -> Iterator[Any]:
        if self._service_factory is not None:
            yield self._service_factory()
            return

        import pythoncom
        import win32com.client

        pythoncom.CoInitialize()
        try:
            service = win32com.client.Dispatch("Schedule.Service")
            try:
                yield service
            finally:
                del service
        finally:
            pythoncom.CoUninitialize()
