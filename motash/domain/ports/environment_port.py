from typing import Protocol


class EnvironmentPort(Protocol):
    """Host preconditions checked before an audit starts."""

    def platform_supported(self) -> bool:
        """True if the host OS meets the minimum version requirement."""
        ...

    def scheduler_service_running(self) -> bool:
        """True if the task scheduling service is active."""
        ...
