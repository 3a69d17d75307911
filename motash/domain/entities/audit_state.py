from datetime import datetime

from pydantic import BaseModel, Field

from motash.domain.value_objects.audit_settings import AuditSettings
from motash.domain.value_objects.timestamps import EPOCH


class AuditState(BaseModel):
    """State of one audit session.

    ``last_check`` is the watermark: task runs older than it were seen by a
    previous audit. It only moves when the caller sets it.
    """

    last_check: datetime = Field(default=EPOCH)
    root_folder_pattern: str = ""
    check_root_tasks: bool = False
    setup_problem: bool = False

    @classmethod
    def from_settings(cls, settings: AuditSettings, last_check: datetime | None = None) -> "AuditState":
        return cls(
            last_check=last_check or EPOCH,
            root_folder_pattern=settings.root_folder_pattern,
            check_root_tasks=settings.check_root_tasks,
        )
