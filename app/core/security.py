from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import uuid

from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.constants import TokenPurposeEnum
from app.core.exceptions import AuthError
from app.schemas.token import TokenPayload


class TokenService:
    """Issues and verifies signed, time-limited identity tokens.

    The signing key is passed in at construction; nothing here reads
    process-wide state.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_expires: timedelta = timedelta(days=7),
        verification_expires: timedelta = timedelta(hours=1),
    ):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_expires = access_expires
        self._verification_expires = verification_expires

    def _encode(self, identity: Any, purpose: TokenPurposeEnum, expires_delta: timedelta) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(identity),
            "purpose": purpose.value,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def issue(self, identity: Any, expires_delta: Optional[timedelta] = None) -> str:
        return self._encode(identity, TokenPurposeEnum.ACCESS, expires_delta or self._access_expires)

    def issue_verification(self, identity: Any) -> str:
        return self._encode(identity, TokenPurposeEnum.VERIFICATION, self._verification_expires)

    def verify(self, token: str, purpose: TokenPurposeEnum = TokenPurposeEnum.ACCESS) -> TokenPayload:
        # expired, malformed and forged tokens all surface as the same AuthError
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
            token_data = TokenPayload(**payload)
        except ExpiredSignatureError:
            raise AuthError("Token has expired")
        except (JWTError, PydanticValidationError):
            raise AuthError("Invalid token")

        if token_data.purpose != purpose:
            raise AuthError("Invalid token")
        return token_data


token_service = TokenService(
    settings.SECRET_KEY,
    algorithm=settings.JWT_ALGORITHM,
    access_expires=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    verification_expires=timedelta(minutes=settings.VERIFICATION_TOKEN_EXPIRE_MINUTES),
)
