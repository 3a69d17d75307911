from motash.domain.ports.config_port import ConfigSourcePort
from motash.domain.value_objects.audit_settings import (
    DEFAULT_FAILURE_FORMAT,
    DEFAULT_STATE_FILE,
    AuditSettings,
)
from motash.infrastructure.config.json_config_source import ConfigError

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be true or false, got '{raw}'")


def parse_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_audit_settings(source: ConfigSourcePort) -> AuditSettings:
    """Read every setting once from ``source``."""
    failure_format = source.get("FailureFormat", "") or DEFAULT_FAILURE_FORMAT
    return AuditSettings(
        check_root_tasks=parse_bool("CheckRootTasks", source.get("CheckRootTasks", "false")),
        root_folder_pattern=source.get("RootFolderPattern", "").strip(),
        failure_format=failure_format,
        notifiers=parse_list(source.get("Notifiers", "")),
        notifier_plugins=parse_list(source.get("NotifierPlugins", "")),
        webhook_url=source.get("WebhookUrl", "").strip() or None,
        report_file=source.get("ReportFile", "").strip() or None,
        state_file=source.get("StateFile", "").strip() or DEFAULT_STATE_FILE,
    )
