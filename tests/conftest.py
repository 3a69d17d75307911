from collections.abc import Callable
from datetime import datetime

import pytest

from motash.domain.entities.audit_state import AuditState
from motash.domain.entities.task_record import TaskFolder, TaskRecord
from motash.domain.value_objects.run_state import TaskRunState

WATERMARK = datetime(2024, 3, 1, 6, 0, 0)
AFTER_WATERMARK = datetime(2024, 3, 1, 7, 30, 0)
BEFORE_WATERMARK = datetime(2024, 2, 28, 23, 0, 0)


@pytest.fixture
def make_task() -> Callable[..., TaskRecord]:
    def _make(
        name: str = "Backup",
        folder: str = "\\Jobs",
        state: TaskRunState = TaskRunState.READY,
        last_run: datetime | None = AFTER_WATERMARK,
        last_result: int = 0,
        description: str = "",
    ) -> TaskRecord:
        return TaskRecord(
            name=name,
            path=f"{folder}\\{name}",
            state=state,
            last_run=last_run,
            last_result=last_result,
            description=description,
        )

    return _make


@pytest.fixture
def audit_state() -> AuditState:
    return AuditState(last_check=WATERMARK, root_folder_pattern="^Jobs$")


@pytest.fixture
def scheduler_tree(make_task: Callable[..., TaskRecord]) -> TaskFolder:
    """Root with a matching 'Jobs' branch and a non-matching 'Other' branch."""
    return TaskFolder(
        name="\\",
        path="\\",
        tasks=[make_task("RootTask", folder="", last_result=1)],
        subfolders=[
            TaskFolder(
                name="Jobs",
                path="\\Jobs",
                tasks=[
                    make_task("Ok", folder="\\Jobs"),
                    make_task("Broken", folder="\\Jobs", last_result=5),
                ],
                subfolders=[
                    TaskFolder(
                        name="Nested",
                        path="\\Jobs\\Nested",
                        tasks=[make_task("Deep", folder="\\Jobs\\Nested", last_result=2)],
                    )
                ],
            ),
            TaskFolder(
                name="Other",
                path="\\Other",
                tasks=[make_task("Ignored", folder="\\Other", last_result=9)],
                subfolders=[
                    TaskFolder(
                        name="Jobs",
                        path="\\Other\\Jobs",
                        tasks=[make_task("AlsoIgnored", folder="\\Other\\Jobs", last_result=9)],
                    )
                ],
            ),
        ],
    )
