from sqlalchemy.orm import Session
from fastapi import BackgroundTasks
from typing import List, Optional
from uuid import UUID

from app.core.constants import NotificationTypeEnum
from app.core.database import persistence_errors
from app.crud.notification import notification as crud_notification
from app.models.notification import Notification
from app.models.user import User
from app.services.email import EmailService
from app.utils.logger import setup_logger

logger = setup_logger("notification_service", "notification_service.log")

EMAIL_SUBJECTS = {
    NotificationTypeEnum.REQUEST_CREATED: "New trip request awaiting your approval",
    NotificationTypeEnum.REQUEST_APPROVED: "Your trip request was approved",
    NotificationTypeEnum.REQUEST_REJECTED: "Your trip request was rejected",
}

class NotificationService:
    def get_user_notifications(self, db: Session, *, user_id: UUID) -> List[Notification]:
        with persistence_errors(db, "list notifications"):
            return crud_notification.get_for_user(db, user_id=user_id)

    def get_unread_count(self, db: Session, *, user_id: UUID) -> int:
        with persistence_errors(db, "count unread notifications"):
            return crud_notification.count_unread_for_user(db, user_id=user_id)

    def mark_notification_as_read(self, db: Session, *, user_id: UUID, notification_id: UUID) -> int:
        """Mark one of the caller's notifications as read.

        Ids that are unknown or belong to another user match no row and change nothing.
        """
        with persistence_errors(db, "mark notification as read"):
            return crud_notification.mark_as_read(db, user_id=user_id, notification_id=notification_id)

    def mark_all_notifications_as_read(self, db: Session, *, user_id: UUID) -> int:
        with persistence_errors(db, "mark all notifications as read"):
            return crud_notification.mark_all_as_read(db, user_id=user_id)

    def clear_notifications(self, db: Session, *, user_id: UUID) -> int:
        with persistence_errors(db, "clear notifications"):
            deleted = crud_notification.delete_for_user(db, user_id=user_id)
        logger.info(f"Cleared {deleted} notifications for user {user_id}")
        return deleted

    # Dispatching

    def record(
        self,
        db: Session,
        *,
        recipient: User,
        message: str,
        notification_type: NotificationTypeEnum,
        link: Optional[str] = None,
        commit: bool = True,
    ) -> Notification:
        """Add the in-app notification row. Created regardless of the recipient's email preference."""
        return crud_notification.create(
            db,
            obj_in={
                "user_id": recipient.id,
                "message": message,
                "notification_type": notification_type.value,
                "link": link,
            },
            commit=commit,
        )

    async def announce(
        self,
        *,
        recipient: User,
        message: str,
        notification_type: NotificationTypeEnum,
        link: Optional[str] = None,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> bool:
        """Queue the email for a notification that has already been committed.

        Returns False when the recipient opted out of emails.
        """
        if recipient.email_notification_opt_out:
            logger.info(f"User {recipient.id} opted out of emails; skipping {notification_type.value} email")
            return False

        email_kwargs = dict(
            to_email=recipient.email,
            subject=EMAIL_SUBJECTS.get(notification_type, "You have a new notification"),
            template_name="notification.html",
            template_context={
                "recipient_name": recipient.full_name,
                "message": message,
                "link": link,
            },
        )
        if background_tasks is not None:
            background_tasks.add_task(EmailService.send_email, **email_kwargs)
            return True
        try:
            await EmailService.send_email(**email_kwargs)
        except Exception as e:
            logger.error(f"Could not queue email for user {recipient.id}: {e}")
        return True

notification_service = NotificationService()
