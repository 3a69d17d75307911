from datetime import datetime

from pydantic import BaseModel

from motash.domain.value_objects.marker_codes import (
    APP_ERROR_ID,
    APP_ERROR_NAME,
    APP_WARNING_ID,
    APP_WARNING_NAME,
)


class Failure(BaseModel, frozen=True):
    """A task run that violated its rule, or a problem with the audit itself."""

    name: str
    path: str
    last_run: datetime
    result: int

    @property
    def is_synthetic(self) -> bool:
        """True for setup problems and application exceptions."""
        return self.result in (APP_ERROR_ID, APP_WARNING_ID)

    @classmethod
    def setup_problem(cls, message: str) -> "Failure":
        return cls(
            name=APP_WARNING_NAME,
            path=message,
            last_run=datetime.now(),
            result=APP_WARNING_ID,
        )

    @classmethod
    def application_exception(cls, error: BaseException) -> "Failure":
        return cls(
            name=APP_ERROR_NAME,
            path=str(error) or type(error).__name__,
            last_run=datetime.now(),
            result=APP_ERROR_ID,
        )
