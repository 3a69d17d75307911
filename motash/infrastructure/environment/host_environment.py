import sys
from collections.abc import Callable

from loguru import logger

SCHEDULER_SERVICE_NAME = "Schedule"
MIN_WINDOWS_MAJOR_VERSION = 6  # Vista


def _windows_major_version() -> int | None:
    if sys.platform != "win32":
        return None
    return sys.getwindowsversion().major  # type: ignore[attr-defined]


def _query_service_running(service_name: str) -> bool:
    import win32service
    import win32serviceutil

    status = win32serviceutil.QueryServiceStatus(service_name)
    return bool(status[1] == win32service.SERVICE_RUNNING)


class WindowsEnvironment:
    """Preconditions of the local Windows host."""

    def __init__(
        self,
        version_reader: Callable[[], int | None] = _windows_major_version,
        service_query: Callable[[str], bool] = _query_service_running,
    ) -> None:
        self._version_reader = version_reader
        self._service_query = service_query

    def platform_supported(self) -> bool:
        major = self._version_reader()
        return major is not None and major >= MIN_WINDOWS_MAJOR_VERSION

    def scheduler_service_running(self) -> bool:
        try:
            return self._service_query(SCHEDULER_SERVICE_NAME)
        except Exception as e:
            logger.warning("Cannot query service '{}': {}", SCHEDULER_SERVICE_NAME, e)
            return False


class StaticEnvironment:
    """Fixed precondition answers, used for snapshot audits."""

    def __init__(self, platform_ok: bool = True, service_running: bool = True) -> None:
        self.platform_ok = platform_ok
        self.service_running = service_running

    def platform_supported(self) -> bool:
        return self.platform_ok

    def scheduler_service_running(self) -> bool:
        return self.service_running
