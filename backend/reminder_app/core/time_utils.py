from datetime import datetime, timezone
from typing import Union


def as_utc(value: datetime) -> datetime:
    """Pin a datetime to UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: Union[datetime, str]) -> datetime:
    """ISO-8601 string or datetime -> aware UTC datetime. Raises ValueError on bad strings."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    return as_utc(value)
