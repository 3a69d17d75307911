from motash.domain.ports.config_port import ConfigSourcePort
from motash.domain.ports.environment_port import EnvironmentPort
from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.ports.scheduler_port import FolderView, SchedulerSourcePort, TaskView

__all__ = [
    # Config port
    "ConfigSourcePort",
    # Environment port
    "EnvironmentPort",
    # Notifier port
    "NotifierPort",
    # Scheduler port
    "FolderView",
    "SchedulerSourcePort",
    "TaskView",
]
