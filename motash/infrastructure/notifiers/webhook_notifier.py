from collections.abc import Sequence

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from motash import APP_NAME
from motash.domain.entities.failure import Failure
from motash.domain.ports.notifier_port import NotifierPort
from motash.domain.services.failure_formatter import failures_as_text
from motash.domain.value_objects.audit_settings import DEFAULT_FAILURE_FORMAT

REQUEST_TIMEOUT = 30.0
MAX_ATTEMPTS = 3


def _is_retryable_error(error: BaseException) -> bool:
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return False


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning("Webhook delivery failed (attempt {}): {}", retry_state.attempt_number, error)


class WebhookNotifier(NotifierPort):
    """POSTs the failures as JSON to an HTTP endpoint."""

    name = "webhook"

    def __init__(
        self,
        url: str,
        template: str = DEFAULT_FAILURE_FORMAT,
        transport: httpx.BaseTransport | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        retry_wait: float = 1.0,
    ) -> None:
        self.url = url
        self.template = template
        self._transport = transport
        self._max_attempts = max_attempts
        self._retry_wait = retry_wait

    def build_payload(self, failures: Sequence[Failure]) -> dict[str, object]:
        return {
            "application": APP_NAME,
            "count": len(failures),
            "failures": [failure.model_dump(mode="json") for failure in failures],
            "text": failures_as_text(failures, self.template),
        }

    def send(self, failures: Sequence[Failure]) -> None:
        payload = self.build_payload(failures)
        post = retry(
            retry=retry_if_exception(_is_retryable_error),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._retry_wait, max=30),
            before_sleep=_log_retry,
            reraise=True,
        )(self._post)
        post(payload)

    def _post(self, payload: dict[str, object]) -> None:
        with httpx.Client(timeout=REQUEST_TIMEOUT, transport=self._transport) as client:
            response = client.post(self.url, json=payload)
            response.raise_for_status()
        logger.debug("Webhook {} accepted {} failures", self.url, payload["count"])
