from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from app.core.database import get_db
from app.models.user import User
from app.schemas.response import APIResponse
from app.utils import deps
from app.schemas.notification import Notification
from app.services.notification import notification_service
from app.services.user import user_service

router = APIRouter()

@router.patch("/optOut", response_model=APIResponse[None])
async def opt_out_of_email_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Stop email notifications for the current user. In-app notifications continue."""
    user_service.opt_out(db, user=user)
    return APIResponse(message="You have opted out of email notifications")

@router.patch("/optIn", response_model=APIResponse[None])
async def opt_in_to_email_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Resume email notifications for the current user."""
    user_service.opt_in(db, user=user)
    return APIResponse(message="You have opted in to email notifications")

@router.get("", response_model=APIResponse[List[Notification]])
async def get_my_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Retrieve notifications for the current user, newest first."""
    data = notification_service.get_user_notifications(db, user_id=user.id)
    return APIResponse(message="Notifications fetched successfully", data=data)

@router.get("/unreadCount", response_model=APIResponse[int])
async def get_unread_notifications_count(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    count = notification_service.get_unread_count(db, user_id=user.id)
    return APIResponse(message="Unread notifications count fetched successfully", data=count)

@router.patch("/markAsRead/{notification_id}", response_model=APIResponse[None])
async def mark_notification_as_read(
    notification_id: UUID,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Mark one of the current user's notifications as read."""
    notification_service.mark_notification_as_read(db, user_id=user.id, notification_id=notification_id)
    return APIResponse(message="Notification marked as read")

@router.patch("/markAllAsRead", response_model=APIResponse[None])
async def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Mark all notifications for the current user as read."""
    notification_service.mark_all_notifications_as_read(db, user_id=user.id)
    return APIResponse(message="All notifications marked as read")

@router.delete("/clear", response_model=APIResponse[None])
async def clear_notifications(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Permanently delete all of the current user's notifications."""
    notification_service.clear_notifications(db, user_id=user.id)
    return APIResponse(message="Notifications cleared")
