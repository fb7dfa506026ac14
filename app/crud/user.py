from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    def set_email_opt_out(self, db: Session, *, user_id: UUID, opt_out: bool) -> int:
        updated = (
            db.query(User)
            .filter(User.id == user_id)
            .update({"email_notification_opt_out": opt_out}, synchronize_session=False)
        )
        db.commit()
        return updated

    def get_manager_chain(self, db: Session, *, user_id: UUID, max_depth: int = 100) -> List[UUID]:
        """Ids of the line managers above ``user_id``, nearest first."""
        chain: List[UUID] = []
        current: Optional[User] = self.get(db, id=user_id)
        while current is not None and current.line_manager_id is not None and len(chain) < max_depth:
            if current.line_manager_id in chain:
                break
            chain.append(current.line_manager_id)
            current = self.get(db, id=current.line_manager_id)
        return chain

user = CRUDUser(User)
