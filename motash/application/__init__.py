from motash.application.audit_engine import AuditEngine
from motash.application.notification_dispatcher import NotificationDispatcher

__all__ = ["AuditEngine", "NotificationDispatcher"]
