import re

from motash.domain.value_objects.marker_codes import SCHED_S_TASK_RUNNING

# Curly brackets with nothing but digits and commas in between, e.g. "{0,1,267009}"
ALLOWED_RESULTS_PATTERN = r"\{[0-9,]+\}"

DEFAULT_ALLOWED_RESULTS = frozenset({0})

FALLBACK_RESULT_CODE = 0

_INT32_MAX = 2**31 - 1


def _parse_code(token: str) -> int:
    token = token.strip()
    if not token.isdigit():
        return FALLBACK_RESULT_CODE
    value = int(token)
    if value > _INT32_MAX:
        return FALLBACK_RESULT_CODE
    return value


class ResultCodeParser:
    """Extracts the acceptable exit codes for a task from its description.

    Exactly one ``{a,b,c}`` group overrides the default of ``{0}``. Zero or
    several groups are ambiguous and fall back to the default. The
    "task is still running" code is always allowed.
    """

    def __init__(self, pattern: str = ALLOWED_RESULTS_PATTERN) -> None:
        self._find = re.compile(pattern)

    def parse(self, description: str | None) -> frozenset[int]:
        matches = self._find.findall(description or "")
        if len(matches) == 1:
            base = frozenset(_parse_code(token) for token in matches[0][1:-1].split(","))
        else:
            base = DEFAULT_ALLOWED_RESULTS

        return base | {SCHED_S_TASK_RUNNING}
