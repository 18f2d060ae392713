from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from reminder_app.core.errors import ConflictError, InternalError
from reminder_app.core.logging import logger
from reminder_app.models import User
from reminder_app.models.user import normalize_email


def get_by_email(session: Session, email: str) -> Optional[User]:
    try:
        return session.exec(
            select(User).where(User.email == normalize_email(email))
        ).first()
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed")
        raise InternalError() from exc


def add(session: Session, user: User) -> User:
    """Persist a new user. The unique email index decides concurrent races."""
    session.add(user)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError("User already exists with this email") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("User insert failed")
        raise InternalError() from exc
    session.refresh(user)
    return user
