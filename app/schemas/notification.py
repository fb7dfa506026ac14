from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from uuid import UUID

class NotificationBase(BaseModel):
    """Base schema for a notification."""
    message: str
    link: Optional[str] = None
    notification_type: Optional[str] = None

class NotificationCreate(NotificationBase):
    """Schema for creating a notification."""
    user_id: UUID

class NotificationUpdate(BaseModel):
    """Schema for updating a notification (e.g., marking as read)."""
    is_read: bool

class Notification(NotificationBase):
    """Schema for reading a notification, includes ID and status."""
    id: UUID
    user_id: UUID
    is_read: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
