from motash.infrastructure.notifiers.console_notifier import ConsoleNotifier
from motash.infrastructure.notifiers.file_notifier import FileNotifier
from motash.infrastructure.notifiers.log_notifier import LogNotifier
from motash.infrastructure.notifiers.registry import (
    NotifierPluginError,
    NotifierRegistry,
    build_registry,
)
from motash.infrastructure.notifiers.webhook_notifier import WebhookNotifier

__all__ = [
    "ConsoleNotifier",
    "FileNotifier",
    "LogNotifier",
    "NotifierPluginError",
    "NotifierRegistry",
    "WebhookNotifier",
    "build_registry",
]
