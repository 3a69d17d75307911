from datetime import datetime

EPOCH = datetime(1970, 1, 1)

REPORT_TIMESTAMP_FORMAT = "%d-%b-%Y %H:%M:%S"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time, leave naive ones untouched."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def format_report_timestamp(value: datetime) -> str:
    return to_local_naive(value).strftime(REPORT_TIMESTAMP_FORMAT)
