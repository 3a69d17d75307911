"""Scheduler snapshots: a folder tree exported to JSON and audited offline."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from motash.domain.entities.task_record import TaskFolder, TaskRecord
from motash.domain.ports.scheduler_port import FolderView, SchedulerSourcePort
from motash.domain.value_objects.run_state import TaskRunState


class SnapshotSchedulerSource(SchedulerSourcePort):
    """Reads the folder tree from a JSON snapshot file.

    The file is loaded on every ``connect()``, so a missing or invalid
    snapshot surfaces as an error of the audit pass.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @contextmanager
    def connect(self) -> Iterator[FolderView]:
        root = TaskFolder.model_validate_json(self.path.read_text(encoding="utf-8"))
        logger.debug("Loaded scheduler snapshot {}", self.path)
        yield root


def export_snapshot(folder: FolderView) -> TaskFolder:
    """Copy a live folder tree into plain models that can be saved as a snapshot."""
    return TaskFolder(
        name=folder.name,
        path=folder.path,
        tasks=[
            TaskRecord(
                name=task.name,
                path=task.path,
                state=TaskRunState(task.state),
                last_run=task.last_run,
                last_result=task.last_result,
                description=task.description or "",
            )
            for task in folder.tasks
        ],
        subfolders=[export_snapshot(subfolder) for subfolder in folder.subfolders],
    )


def write_snapshot(folder: FolderView, path: Path) -> TaskFolder:
    snapshot = export_snapshot(folder)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Wrote scheduler snapshot to {}", path)
    return snapshot
