"""
Registration, login and token verification.

Tokens are stateless JWTs whose only claim besides ``exp`` is ``sub`` (the
owner id); verification never touches the database.
"""

import uuid
from typing import Optional

from jose import JWTError
from sqlmodel import Session

from reminder_app.core.config import settings
from reminder_app.core.errors import AuthError, ConflictError, InvalidCredentialsError, ValidationError
from reminder_app.core.logging import logger
from reminder_app.core.security import create_access_token, decode_token, verify_password
from reminder_app.models import User
from reminder_app.stores import users as user_store


def _require_credentials(email: Optional[str], password: Optional[str]) -> None:
    if not email or not email.strip() or not password:
        raise ValidationError("Please enter email and password")


def issue_token(owner_id: uuid.UUID) -> str:
    return create_access_token(subject=str(owner_id), expires_minutes=settings.jwt_expire_minutes)


def register(session: Session, email: Optional[str], password: Optional[str]) -> str:
    _require_credentials(email, password)

    if user_store.get_by_email(session, email) is not None:
        raise ConflictError("User already exists with this email")

    user = user_store.add(session, User.create(email, password))
    logger.info("Registered user %s", user.id)
    return issue_token(user.id)


def login(session: Session, email: Optional[str], password: Optional[str]) -> str:
    _require_credentials(email, password)

    user = user_store.get_by_email(session, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    return issue_token(user.id)


def verify(token: Optional[str]) -> uuid.UUID:
    """Return the owner id carried by a valid token, or raise ``AuthError``."""
    if not token:
        raise AuthError("No token, authorization denied")
    try:
        payload = decode_token(token)
        return uuid.UUID(str(payload["sub"]))
    except (JWTError, KeyError, ValueError) as exc:
        raise AuthError() from exc
