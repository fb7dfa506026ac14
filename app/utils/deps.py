from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.database import get_db, persistence_errors
from app.core.exceptions import AuthError, PermissionDeniedError
from app.core.security import TokenService, token_service
from app.crud.user import user as user_crud
from app.models.user import User

# auto_error=False so a missing header goes through AuthError like a bad token does
http_bearer = HTTPBearer(auto_error=False)

def get_token_service() -> TokenService:
    return token_service

async def get_current_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthError("Authorization token is missing")

    token_data = tokens.verify(credentials.credentials)

    with persistence_errors(db, "resolve current user"):
        user = user_crud.get(db, id=token_data.user_id)
    if not user:
        raise AuthError("User not found")
    if not user.is_active:
        raise PermissionDeniedError("User account is inactive")
    return user
