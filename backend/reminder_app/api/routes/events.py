import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from reminder_app.core.database import get_session
from reminder_app.api.deps import get_current_owner_id
from reminder_app.schemas.reminder import ReminderCreate, ReminderOut, MessageOut
from reminder_app.services import reminders as reminder_service

router = APIRouter(prefix="/events", tags=["events"])

@router.get("", response_model=List[ReminderOut])
def list_events(
    day: Optional[date] = None,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    session: Session = Depends(get_session),
):
    reminders = reminder_service.list_reminders(session, owner_id, day=day)
    return [ReminderOut.model_validate(r) for r in reminders]

@router.post("", response_model=ReminderOut, status_code=status.HTTP_201_CREATED)
def create_event(
    data: ReminderCreate,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    session: Session = Depends(get_session),
):
    reminder = reminder_service.create_reminder(session, owner_id, data.title, data.event_time)
    return ReminderOut.model_validate(reminder)

@router.delete("/{reminder_id}", response_model=MessageOut)
def delete_event(
    reminder_id: str,
    owner_id: uuid.UUID = Depends(get_current_owner_id),
    session: Session = Depends(get_session),
):
    reminder_service.delete_reminder(session, owner_id, reminder_id)
    return MessageOut(msg="Reminder removed")
