from motash.infrastructure.environment.host_environment import (
    StaticEnvironment,
    WindowsEnvironment,
)

__all__ = ["StaticEnvironment", "WindowsEnvironment"]
