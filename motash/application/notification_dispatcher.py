from collections.abc import Sequence

from loguru import logger

from motash.domain.entities.failure import Failure
from motash.domain.ports.notifier_port import NotifierPort


class NotificationDispatcher:
    """Hands an audit's failures to every registered notifier in turn.

    Each notifier is best effort: one that raises is logged and skipped, the
    remaining notifiers still run.
    """

    def __init__(self, notifiers: Sequence[NotifierPort]) -> None:
        self.notifiers = list(notifiers)

    def dispatch(self, failures: Sequence[Failure]) -> int:
        """Send ``failures`` to all notifiers.

        Returns the number of notifiers that completed. Nothing is sent for an
        empty failure list.
        """
        if not failures:
            return 0

        sent = 0
        for notifier in self.notifiers:
            try:
                notifier.send(list(failures))
            except Exception:
                logger.exception("Notifier '{}' failed", notifier.name)
                continue
            logger.debug("Notifier '{}' sent {} failures", notifier.name, len(failures))
            sent += 1

        return sent
