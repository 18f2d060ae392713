from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from reminder_app.core.time_utils import as_utc

class ReminderCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=120)
    event_time: datetime

class ReminderOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    event_time: datetime
    created_at: datetime
    updated_at: datetime

    @field_validator("event_time", "created_at", "updated_at")
    @classmethod
    def _pin_utc(cls, value: datetime) -> datetime:
        # sqlite hands timestamps back without an offset; they are stored as UTC
        return as_utc(value)

class MessageOut(BaseModel):
    msg: str
