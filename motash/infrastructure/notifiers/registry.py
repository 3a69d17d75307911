"""Notifier registry: built-in notifiers plus plugins named in the configuration."""

import importlib
from pathlib import Path

from loguru import logger

from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.value_objects.audit_settings import AuditSettings
from motash.infrastructure.notifiers.console_notifier import ConsoleNotifier
from motash.infrastructure.notifiers.file_notifier import FileNotifier
from motash.infrastructure.notifiers.log_notifier import LogNotifier
from motash.infrastructure.notifiers.webhook_notifier import WebhookNotifier


class NotifierPluginError(Exception):
    """Raised when a configured notifier plugin cannot be loaded."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        super().__init__(f"Cannot load notifier plugin '{reference}': {reason}")


class NotifierRegistry:
    """Notifiers by name, in registration order."""

    def __init__(self) -> None:
        self._notifiers: dict[str, NotifierPort] = {}

    def register(self, notifier: NotifierPort) -> None:
        if notifier.name in self._notifiers:
            logger.warning("Notifier '{}' registered twice, keeping the last one", notifier.name)
        self._notifiers[notifier.name] = notifier

    def get(self, name: str) -> NotifierPort | None:
        return self._notifiers.get(name)

    def names(self) -> list[str]:
        return list(self._notifiers)

    def list_all(self) -> list[NotifierPort]:
        return list(self._notifiers.values())

    def select(self, names: list[str]) -> list[NotifierPort]:
        """Notifiers for ``names``; all of them when ``names`` is empty."""
        if not names:
            return self.list_all()

        selected: list[NotifierPort] = []
        for name in names:
            notifier = self.get(name)
            if notifier is None:
                logger.warning("Unknown notifier '{}', skipping", name)
                continue
            selected.append(notifier)
        return selected

    def load_plugin(self, reference: str) -> NotifierPort:
        """Import ``module:attribute`` and register the notifier it names.

        The attribute may be a notifier instance, a notifier class or a
        factory function taking no arguments.
        """
        module_name, _, attr = reference.partition(":")
        if not module_name or not attr:
            raise NotifierPluginError(reference, "expected 'module:attribute'")

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise NotifierPluginError(reference, str(e)) from e

        target = getattr(module, attr, None)
        if target is None:
            raise NotifierPluginError(reference, f"module has no attribute '{attr}'")

        try:
            notifier = target if isinstance(target, NotifierPort) else target()
        except Exception as e:
            raise NotifierPluginError(reference, str(e)) from e
        if not isinstance(notifier, NotifierPort):
            raise NotifierPluginError(reference, "not a notifier")

        self.register(notifier)
        logger.info("Loaded notifier plugin '{}' from {}", notifier.name, reference)
        return notifier


def build_registry(settings: AuditSettings) -> NotifierRegistry:
    """Registry with the built-in notifiers the settings enable, plus plugins."""
    registry = NotifierRegistry()

    registry.register(ConsoleNotifier())
    registry.register(LogNotifier(settings.failure_format))

    if settings.report_file:
        registry.register(FileNotifier(Path(settings.report_file), settings.failure_format))

    if settings.webhook_url:
        registry.register(WebhookNotifier(settings.webhook_url, settings.failure_format))

    for reference in settings.notifier_plugins:
        try:
            registry.load_plugin(reference)
        except NotifierPluginError as e:
            logger.error("{}", e)

    return registry
