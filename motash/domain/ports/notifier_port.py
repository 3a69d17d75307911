from abc import ABC, abstractmethod
from collections.abc import Sequence

from motash.domain.entities.failure import Failure


class NotifierPort(ABC):
    """Port for delivering a failure report to an external channel."""

    name: str = "notifier"

    @abstractmethod
    def send(self, failures: Sequence[Failure]) -> None:
        """Deliver the failures. May raise; the dispatcher logs and moves on."""
