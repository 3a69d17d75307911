from motash.infrastructure.config.json_config_source import (
    ConfigError,
    DictConfigSource,
    JsonConfigSource,
)
from motash.infrastructure.config.settings_loader import load_audit_settings

__all__ = [
    "ConfigError",
    "DictConfigSource",
    "JsonConfigSource",
    "load_audit_settings",
]
