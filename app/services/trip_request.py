from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from app.core.constants import NotificationTypeEnum, RequestStatusEnum
from app.core.database import persistence_errors
from app.core.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from app.crud.accommodation import accommodation as crud_accommodation
from app.crud.trip_request import trip_request as crud_trip_request
from app.crud.user import user as crud_user
from app.models.trip_request import TripRequest
from app.models.user import User
from app.schemas.trip_request import TripRequestCreate
from app.services.notification import notification_service
from app.utils.logger import setup_logger

logger = setup_logger("trip_request_service", "trip_request_service.log")

DECISION_NOTIFICATIONS = {
    RequestStatusEnum.APPROVED: NotificationTypeEnum.REQUEST_APPROVED,
    RequestStatusEnum.REJECTED: NotificationTypeEnum.REQUEST_REJECTED,
}

def _request_link(trip: TripRequest) -> str:
    return f"/requests/{trip.id}"

def _describe(trip: TripRequest) -> str:
    return f"{trip.type.value} trip from {trip.origin_city} to {trip.destination_city} on {trip.departure_date.isoformat()}"

class TripRequestService:

    async def create_request(
        self,
        db: Session,
        *,
        requester: User,
        request_in: TripRequestCreate,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> TripRequest:
        manager: Optional[User] = None
        message = ""
        with persistence_errors(db, "create trip request"):
            if request_in.accommodation_id is not None:
                if crud_accommodation.get(db, id=request_in.accommodation_id) is None:
                    raise NotFoundError("accommodation", request_in.accommodation_id)

            trip = crud_trip_request.create(
                db,
                obj_in={
                    **request_in.model_dump(),
                    "requester_id": requester.id,
                    "status": RequestStatusEnum.PENDING,
                },
                commit=False,
            )

            if requester.line_manager_id is not None:
                manager = crud_user.get(db, id=requester.line_manager_id)

            if manager is not None:
                message = f"{requester.full_name or requester.email} requested a {_describe(trip)}"
                notification_service.record(
                    db,
                    recipient=manager,
                    message=message,
                    notification_type=NotificationTypeEnum.REQUEST_CREATED,
                    link=_request_link(trip),
                    commit=False,
                )
            else:
                logger.warning(f"User {requester.id} has no line manager; request {trip.id} will wait unassigned")

            db.commit()
            db.refresh(trip)

        logger.info(f"Trip request {trip.id} created by {requester.id}")
        if manager is not None:
            await notification_service.announce(
                recipient=manager,
                message=message,
                notification_type=NotificationTypeEnum.REQUEST_CREATED,
                link=_request_link(trip),
                background_tasks=background_tasks,
            )
        return trip

    def get_my_requests(self, db: Session, *, requester: User) -> List[TripRequest]:
        with persistence_errors(db, "list trip requests"):
            return crud_trip_request.get_for_requester(db, requester_id=requester.id)

    def get_pending_approvals(self, db: Session, *, manager: User) -> List[TripRequest]:
        with persistence_errors(db, "list pending approvals"):
            return crud_trip_request.get_pending_for_manager(db, manager_id=manager.id)

    def get_request(self, db: Session, *, request_id: UUID, user: User) -> TripRequest:
        with persistence_errors(db, "get trip request"):
            trip = crud_trip_request.get(db, id=request_id)
            visible = trip is not None and (
                trip.requester_id == user.id or trip.requester.line_manager_id == user.id
            )
        if not visible:
            raise NotFoundError("request", request_id)
        return trip

    async def decide(
        self,
        db: Session,
        *,
        request_id: UUID,
        manager: User,
        decision: RequestStatusEnum,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> TripRequest:
        if decision not in DECISION_NOTIFICATIONS:
            raise ValueError(f"{decision} is not a decision")

        notification_type = DECISION_NOTIFICATIONS[decision]
        with persistence_errors(db, f"{decision.value} trip request"):
            trip = crud_trip_request.get(db, id=request_id)
            if trip is None:
                raise NotFoundError("request", request_id)

            requester = trip.requester
            if requester.line_manager_id != manager.id:
                raise PermissionDeniedError("Only the requester's line manager can decide on this request")
            if trip.status != RequestStatusEnum.PENDING:
                raise ConflictError(f"Request has already been {trip.status.value}")

            trip.status = decision
            trip.decided_by_id = manager.id
            trip.decided_at = datetime.now(timezone.utc)
            db.add(trip)

            message = f"Your {_describe(trip)} was {decision.value} by {manager.full_name or manager.email}"
            notification_service.record(
                db,
                recipient=requester,
                message=message,
                notification_type=notification_type,
                link=_request_link(trip),
                commit=False,
            )
            db.commit()
            db.refresh(trip)

        logger.info(f"Trip request {trip.id} {decision.value} by {manager.id}")
        await notification_service.announce(
            recipient=requester,
            message=message,
            notification_type=notification_type,
            link=_request_link(trip),
            background_tasks=background_tasks,
        )
        return trip

    async def approve(self, db: Session, *, request_id: UUID, manager: User, background_tasks: Optional[BackgroundTasks] = None) -> TripRequest:
        return await self.decide(
            db, request_id=request_id, manager=manager, decision=RequestStatusEnum.APPROVED, background_tasks=background_tasks
        )

    async def reject(self, db: Session, *, request_id: UUID, manager: User, background_tasks: Optional[BackgroundTasks] = None) -> TripRequest:
        return await self.decide(
            db, request_id=request_id, manager=manager, decision=RequestStatusEnum.REJECTED, background_tasks=background_tasks
        )

trip_request_service = TripRequestService()
