from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
import uuid

from reminder_app.core.security import hash_password


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, email: str, password: str) -> "User":
        """Build a new user with a normalized email and a hashed password."""
        return cls(email=normalize_email(email), password_hash=hash_password(password))
