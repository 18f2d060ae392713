from datetime import datetime
from typing import List, Optional
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from reminder_app.core.errors import InternalError
from reminder_app.core.logging import logger
from reminder_app.models import Reminder


def list_for_owner(
    session: Session,
    owner_id: uuid.UUID,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[Reminder]:
    """Reminders of one owner, ascending by event time, optionally in [start, end)."""
    query = select(Reminder).where(Reminder.owner_id == owner_id)
    if start is not None:
        query = query.where(Reminder.event_time >= start)
    if end is not None:
        query = query.where(Reminder.event_time < end)
    query = query.order_by(Reminder.event_time.asc(), Reminder.created_at.asc())
    try:
        return list(session.exec(query).all())
    except SQLAlchemyError as exc:
        logger.exception("Reminder listing failed")
        raise InternalError() from exc


def get(session: Session, reminder_id: uuid.UUID) -> Optional[Reminder]:
    try:
        return session.get(Reminder, reminder_id)
    except SQLAlchemyError as exc:
        logger.exception("Reminder lookup failed")
        raise InternalError() from exc


def add(session: Session, reminder: Reminder) -> Reminder:
    session.add(reminder)
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Reminder insert failed")
        raise InternalError() from exc
    session.refresh(reminder)
    return reminder


def delete(session: Session, reminder: Reminder) -> None:
    session.delete(reminder)
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Reminder delete failed")
        raise InternalError() from exc
