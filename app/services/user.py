from uuid import UUID
from sqlalchemy.orm import Session

from app.core.database import persistence_errors
from app.core.exceptions import NotFoundError, ValidationError
from app.crud.user import user as crud_user
from app.models.user import User
from app.utils.logger import setup_logger

logger = setup_logger("user_service", "user_service.log")

class UserService:

    def set_email_opt_out(self, db: Session, *, user: User, opt_out: bool) -> None:
        with persistence_errors(db, "update email notification preference"):
            crud_user.set_email_opt_out(db, user_id=user.id, opt_out=opt_out)
        logger.info(f"User {user.id} email notifications {'disabled' if opt_out else 'enabled'}")

    def opt_out(self, db: Session, *, user: User) -> None:
        self.set_email_opt_out(db, user=user, opt_out=True)

    def opt_in(self, db: Session, *, user: User) -> None:
        self.set_email_opt_out(db, user=user, opt_out=False)

    def set_line_manager(self, db: Session, *, user: User, manager_id: UUID) -> User:
        if manager_id == user.id:
            raise ValidationError("A user cannot be their own line manager")

        with persistence_errors(db, "assign line manager"):
            manager = crud_user.get(db, id=manager_id)
            if manager is None:
                raise NotFoundError("line manager", manager_id)

            if user.id in crud_user.get_manager_chain(db, user_id=manager_id):
                raise ValidationError("This assignment would create a reporting cycle")

            updated = crud_user.update(db, db_obj=user, obj_in={"line_manager_id": manager_id})
        logger.info(f"User {user.id} now reports to {manager_id}")
        return updated

user_service = UserService()
