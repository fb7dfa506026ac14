from pydantic import BaseModel
from uuid import UUID

from app.core.constants import TokenPurposeEnum

class TokenPayload(BaseModel):
    sub: UUID
    purpose: TokenPurposeEnum = TokenPurposeEnum.ACCESS
    jti: str | None = None
    exp: int | None = None

    @property
    def user_id(self) -> UUID:
        return self.sub
