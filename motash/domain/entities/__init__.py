from motash.domain.entities.audit_state import AuditState
from motash.domain.entities.failure import Failure
from motash.domain.entities.task_record import TaskFolder, TaskRecord

__all__ = [
    "AuditState",
    "Failure",
    "TaskFolder",
    "TaskRecord",
]
