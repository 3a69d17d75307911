"""Tests for the Windows Task Scheduler COM adapter, with COM objects faked."""

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest

from motash.domain.value_objects.run_state import TaskRunState
from motash.infrastructure.scheduler.snapshot_source import export_snapshot
from motash.infrastructure.scheduler.windows_source import ComTask, WindowsSchedulerSource


def _com_task(
    name: str,
    folder: str,
    state: int = 3,
    result: int = 0,
    description: str | None = "",
    last_run: datetime = datetime(2024, 3, 1, 7, 30, tzinfo=UTC),
) -> SimpleNamespace:
    return SimpleNamespace(
        Name=name,
        Path=f"{folder}\\{name}",
        State=state,
        LastRunTime=last_run,
        LastTaskResult=result,
        Definition=SimpleNamespace(RegistrationInfo=SimpleNamespace(Description=description)),
    )


class FakeComFolder:
    def __init__(self, name: str, path: str, tasks: list[Any], folders: list[Any]) -> None:
        self.Name = name
        self.Path = path
        self._tasks = tasks
        self._folders = folders
        self.task_flags: list[int] = []

    def GetTasks(self, flags: int) -> list[Any]:  # noqa: N802
        self.task_flags.append(flags)
        return self._tasks

    def GetFolders(self, flags: int) -> list[Any]:  # noqa: N802
        return self._folders


class FakeService:
    def __init__(self, root: FakeComFolder) -> None:
        self.root = root
        self.connected = False

    def Connect(self) -> None:  # noqa: N802
        self.connected = True

    def GetFolder(self, path: str) -> FakeComFolder:  # noqa: N802
        assert path == "\\"
        return self.root


@pytest.fixture
def service() -> FakeService:
    jobs = FakeComFolder(
        "Jobs",
        "\\Jobs",
        [
            _com_task("Backup", "\\Jobs", result=5, description="Backup {0,1}"),
            _com_task("Off", "\\Jobs", state=1),
        ],
        [],
    )
    return FakeService(FakeComFolder("\\", "\\", [], [jobs]))


class TestWindowsSchedulerSource:
    def test_connects_and_yields_root(self, service: FakeService) -> None:
        source = WindowsSchedulerSource(service_factory=lambda: service)

        with source.connect() as root:
            assert root.path == "\\"
            assert [f.name for f in root.subfolders] == ["Jobs"]

        assert service.connected

    def test_task_fields(self, service: FakeService) -> None:
        with WindowsSchedulerSource(service_factory=lambda: service).connect() as root:
            jobs = next(iter(root.subfolders))
            backup, off = list(jobs.tasks)

        assert backup.name == "Backup"
        assert backup.path == "\\Jobs\\Backup"
        assert backup.state == TaskRunState.READY
        assert backup.last_run == datetime(2024, 3, 1, 7, 30)
        assert backup.last_result == 5
        assert backup.description == "Backup {0,1}"
        assert off.state == TaskRunState.DISABLED

    def test_export(self, service: FakeService) -> None:
        with WindowsSchedulerSource(service_factory=lambda: service).connect() as root:
            snapshot = export_snapshot(root)

        assert [f.path for f in snapshot.subfolders] == ["\\Jobs"]
        jobs = snapshot.subfolders[0]
        assert [t.name for t in jobs.tasks] == ["Backup", "Off"]
        assert jobs.tasks[1].state == TaskRunState.DISABLED


class TestComTask:
    def test_unknown_state(self) -> None:
        assert ComTask(_com_task("x", "\\", state=9)).state == TaskRunState.UNKNOWN

    def test_missing_description(self) -> None:
        assert ComTask(_com_task("x", "\\", description=None)).description == ""

    def test_running_state(self) -> None:
        assert ComTask(_com_task("x", "\\", state=4)).state == TaskRunState.RUNNING
