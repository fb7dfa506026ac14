from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.constants import RequestStatusEnum
from app.crud.base import CRUDBase
from app.models.trip_request import TripRequest
from app.models.user import User
from app.schemas.trip_request import TripRequestCreate, TripRequestBase

class CRUDTripRequest(CRUDBase[TripRequest, TripRequestCreate, TripRequestBase]):
    def get_for_requester(self, db: Session, *, requester_id: UUID) -> List[TripRequest]:
        return (
            db.query(self.model)
            .filter(self.model.requester_id == requester_id)
            .order_by(self.model.created_at.desc())
            .all()
        )

    def get_pending_for_manager(self, db: Session, *, manager_id: UUID) -> List[TripRequest]:
        return (
            db.query(self.model)
            .join(User, User.id == self.model.requester_id)
            .filter(User.line_manager_id == manager_id, self.model.status == RequestStatusEnum.PENDING)
            .order_by(self.model.created_at.desc())
            .all()
        )

trip_request = CRUDTripRequest(TripRequest)
