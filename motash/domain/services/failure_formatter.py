from collections.abc import Iterable

from motash.domain.entities.failure import Failure
from motash.domain.value_objects.audit_settings import DEFAULT_FAILURE_FORMAT
from motash.domain.value_objects.timestamps import format_report_timestamp


def format_failure(failure: Failure, template: str = DEFAULT_FAILURE_FORMAT) -> str:
    """Render one failure.

    The template may use positional (``{0}`` path, ``{1}`` result,
    ``{2}`` timestamp) or named (``{path}``, ``{result}``, ``{timestamp}``)
    placeholders.
    """
    path = failure.path
    result = str(failure.result)
    timestamp = format_report_timestamp(failure.last_run)
    return template.format(path, result, timestamp, path=path, result=result, timestamp=timestamp)


def failures_as_text(failures: Iterable[Failure], template: str = DEFAULT_FAILURE_FORMAT) -> str:
    """Render a failure list as a report, one line per failure."""
    return "".join(f"{format_failure(failure, template)}\n" for failure in failures)
