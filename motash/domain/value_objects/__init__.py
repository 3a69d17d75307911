from motash.domain.value_objects.audit_settings import (
    DEFAULT_FAILURE_FORMAT,
    AuditSettings,
)
from motash.domain.value_objects.marker_codes import (
    APP_ERROR_ID,
    APP_ERROR_NAME,
    APP_WARNING_ID,
    APP_WARNING_NAME,
    SCHED_S_TASK_RUNNING,
)
from motash.domain.value_objects.run_state import TaskRunState, is_skipped_state
from motash.domain.value_objects.timestamps import (
    EPOCH,
    REPORT_TIMESTAMP_FORMAT,
    format_report_timestamp,
    to_local_naive,
)

__all__ = [
    "APP_ERROR_ID",
    "APP_ERROR_NAME",
    "APP_WARNING_ID",
    "APP_WARNING_NAME",
    "AuditSettings",
    "DEFAULT_FAILURE_FORMAT",
    "EPOCH",
    "REPORT_TIMESTAMP_FORMAT",
    "SCHED_S_TASK_RUNNING",
    "TaskRunState",
    "format_report_timestamp",
    "is_skipped_state",
    "to_local_naive",
]
