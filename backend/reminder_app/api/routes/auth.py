from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from reminder_app.core.database import get_session
from reminder_app.schemas.auth import RegisterIn, LoginIn, TokenOut
from reminder_app.services import auth as auth_service


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, session: Session = Depends(get_session)):
    token = auth_service.register(session, payload.email, payload.password)
    return TokenOut(token=token)


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, session: Session = Depends(get_session)):
    token = auth_service.login(session, payload.email, payload.password)
    return TokenOut(token=token)
