from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from app.crud.base import CRUDBase
from app.models.notification import Notification
from app.schemas.notification import NotificationCreate, NotificationUpdate

class CRUDNotification(CRUDBase[Notification, NotificationCreate, NotificationUpdate]):
    """CRUD operations for Notifications."""

    def get_for_user(self, db: Session, *, user_id: UUID) -> List[Notification]:
        # Rows sharing an identical created_at come back in no particular order.
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
            .all()
        )

    def count_unread_for_user(self, db: Session, *, user_id: UUID) -> int:
        return db.query(self.model).filter(self.model.user_id == user_id, self.model.is_read == False).count()

    def mark_as_read(self, db: Session, *, user_id: UUID, notification_id: UUID) -> int:
        updated = (
            db.query(self.model)
            .filter(self.model.id == notification_id, self.model.user_id == user_id)
            .update({"is_read": True}, synchronize_session=False)
        )
        db.commit()
        return updated

    def mark_all_as_read(self, db: Session, *, user_id: UUID) -> int:
        updated = (
            db.query(self.model)
            .filter(self.model.user_id == user_id, self.model.is_read == False)
            .update({"is_read": True}, synchronize_session=False)
        )
        db.commit()
        return updated

    def delete_for_user(self, db: Session, *, user_id: UUID) -> int:
        deleted = (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted

notification = CRUDNotification(Notification)
