from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID

class UserBase(BaseModel):
    """Base user schema with common fields."""
    full_name: Optional[str] = None
    email: EmailStr

class UserCreate(UserBase):
    line_manager_id: Optional[UUID] = None
    is_active: bool = True

class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    line_manager_id: Optional[UUID] = None
    email_notification_opt_out: Optional[bool] = None

class User(UserBase):
    """Main user schema for reading user data."""
    id: UUID
    is_active: bool
    line_manager_id: Optional[UUID] = None
    email_notification_opt_out: bool
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class LineManagerUpdate(BaseModel):
    line_manager_id: UUID
