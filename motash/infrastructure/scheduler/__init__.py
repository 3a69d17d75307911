from motash.infrastructure.scheduler.in_memory_source import InMemorySchedulerSource
from motash.infrastructure.scheduler.snapshot_source import (
    SnapshotSchedulerSource,
    export_snapshot,
    write_snapshot,
)
from motash.infrastructure.scheduler.windows_source import WindowsSchedulerSource

__all__ = [
    "InMemorySchedulerSource",
    "SnapshotSchedulerSource",
    "WindowsSchedulerSource",
    "export_snapshot",
    "write_snapshot",
]
