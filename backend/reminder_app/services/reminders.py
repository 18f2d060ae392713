from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List, Optional, Union
import uuid

from sqlmodel import Session

from reminder_app.core.errors import ForbiddenError, NotFoundError, ValidationError
from reminder_app.core.logging import logger
from reminder_app.core.time_utils import as_utc, parse_instant
from reminder_app.models import Reminder
from reminder_app.stores import reminders as reminder_store


def parse_event_time(value: Union[datetime, str, None]) -> datetime:
    if value is None or value == "":
        raise ValidationError("Please provide a title and event time")
    if not isinstance(value, (datetime, str)):
        raise ValidationError("Event time is not a valid timestamp")
    try:
        return parse_instant(value)
    except ValueError as exc:
        raise ValidationError("Event time is not a valid timestamp") from exc


def parse_reminder_id(value: Union[uuid.UUID, str, None]) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise ValidationError("Invalid reminder id") from exc


def list_reminders(
    session: Session,
    owner_id: uuid.UUID,
    day: Optional[date] = None,
    tz: Optional[tzinfo] = None,
) -> List[Reminder]:
    if day is None:
        return reminder_store.list_for_owner(session, owner_id)

    start = datetime.combine(day, time.min, tzinfo=tz or timezone.utc)
    end = start + timedelta(days=1)
    return reminder_store.list_for_owner(session, owner_id, start=as_utc(start), end=as_utc(end))


def create_reminder(
    session: Session,
    owner_id: uuid.UUID,
    title: Optional[str],
    event_time: Union[datetime, str, None],
) -> Reminder:
    if not title or not title.strip():
        raise ValidationError("Please provide a title and event time")
    if len(title.strip()) > 120:
        raise ValidationError("Title must be at most 120 characters")

    reminder = Reminder(
        owner_id=owner_id,
        title=title.strip(),
        event_time=parse_event_time(event_time),
    )
    return reminder_store.add(session, reminder)


def delete_reminder(session: Session, owner_id: uuid.UUID, reminder_id: Union[uuid.UUID, str, None]) -> None:
    reminder = reminder_store.get(session, parse_reminder_id(reminder_id))
    if reminder is None:
        raise NotFoundError("Reminder not found")
    # Ownership is checked only once existence is established.
    if reminder.owner_id != owner_id:
        logger.warning("User %s tried to delete reminder %s of another user", owner_id, reminder.id)
        raise ForbiddenError()

    reminder_store.delete(session, reminder)
    logger.info("Deleted reminder %s", reminder.id)
