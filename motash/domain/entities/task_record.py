from datetime import datetime

from pydantic import BaseModel, Field

from motash.domain.value_objects.run_state import TaskRunState


class TaskRecord(BaseModel):
    """Read-only view of one scheduled task as reported by the scheduler."""

    name: str
    path: str
    state: TaskRunState = TaskRunState.READY
    last_run: datetime | None = Field(default=None, description="None if the task never ran")
    last_result: int = 0
    description: str = ""


class TaskFolder(BaseModel):
    """A scheduler folder with its tasks and subfolders."""

    name: str
    path: str
    tasks: list[TaskRecord] = Field(default_factory=list)
    subfolders: list["TaskFolder"] = Field(default_factory=list)
