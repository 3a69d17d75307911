from pydantic import BaseModel, Field

DEFAULT_FAILURE_FORMAT = "{path} ({result}) at: {timestamp}"
DEFAULT_STATE_FILE = ".motash/state.json"


class AuditSettings(BaseModel, frozen=True):
    """Audit configuration, read once from a configuration source."""

    check_root_tasks: bool = Field(
        default=False, description="Check tasks stored directly in the root folder"
    )
    root_folder_pattern: str = Field(
        default="", description="Case-insensitive regex for first-level folders"
    )
    failure_format: str = Field(default=DEFAULT_FAILURE_FORMAT)
    notifiers: list[str] = Field(
        default_factory=list, description="Enabled notifier names, empty means all"
    )
    notifier_plugins: list[str] = Field(
        default_factory=list, description="Extra notifiers as 'module:attribute'"
    )
    webhook_url: str | None = None
    report_file: str | None = None
    state_file: str = DEFAULT_STATE_FILE
