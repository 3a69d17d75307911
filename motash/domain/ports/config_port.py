from typing import Protocol


class ConfigSourcePort(Protocol):
    def get(self, key: str, default: str = "") -> str:
        """Return the raw value for ``key`` or ``default`` if unset."""
        ...
