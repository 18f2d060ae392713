import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPBearer, HTTPAuthorizationCredentials

from reminder_app.services import auth as auth_service

token_header = APIKeyHeader(name="x-auth-token", auto_error=False)
bearer = HTTPBearer(auto_error=False)

def get_current_owner_id(
    token: Optional[str] = Depends(token_header),
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> uuid.UUID:
    """Resolve the caller's id from ``x-auth-token`` (or a Bearer header)."""
    if not token and creds is not None:
        token = creds.credentials
    return auth_service.verify(token)
