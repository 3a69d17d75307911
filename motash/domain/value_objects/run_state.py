from enum import Enum


class TaskRunState(str, Enum):
    UNKNOWN = "unknown"
    DISABLED = "disabled"
    QUEUED = "queued"
    READY = "ready"
    RUNNING = "running"


def is_skipped_state(state: TaskRunState) -> bool:
    """Disabled and running tasks are never evaluated."""
    return state in (TaskRunState.DISABLED, TaskRunState.RUNNING)
