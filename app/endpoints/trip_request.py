from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from app.core.database import get_db
from app.models.user import User
from app.schemas.response import APIResponse
from app.schemas.trip_request import TripRequest, TripRequestCreate
from app.services.trip_request import trip_request_service
from app.utils import deps

router = APIRouter()

@router.post("", response_model=APIResponse[TripRequest], status_code=status.HTTP_201_CREATED)
async def create_trip_request(
    request_in: TripRequestCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Submit a trip request. The requester's line manager is notified."""
    trip = await trip_request_service.create_request(
        db, requester=user, request_in=request_in, background_tasks=background_tasks
    )
    return APIResponse(message="Trip request created successfully", data=trip)

@router.get("", response_model=APIResponse[List[TripRequest]])
async def get_my_trip_requests(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    data = trip_request_service.get_my_requests(db, requester=user)
    return APIResponse(message="Trip requests fetched successfully", data=data)

@router.get("/pending", response_model=APIResponse[List[TripRequest]])
async def get_pending_approvals(
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    """Pending requests submitted by the current user's direct reports."""
    data = trip_request_service.get_pending_approvals(db, manager=user)
    return APIResponse(message="Pending trip requests fetched successfully", data=data)

@router.get("/{request_id}", response_model=APIResponse[TripRequest])
async def get_trip_request(
    request_id: UUID,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    trip = trip_request_service.get_request(db, request_id=request_id, user=user)
    return APIResponse(message="Trip request fetched successfully", data=trip)

@router.patch("/{request_id}/approve", response_model=APIResponse[TripRequest])
async def approve_trip_request(
    request_id: UUID,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    trip = await trip_request_service.approve(
        db, request_id=request_id, manager=user, background_tasks=background_tasks
    )
    return APIResponse(message="Trip request approved", data=trip)

@router.patch("/{request_id}/reject", response_model=APIResponse[TripRequest])
async def reject_trip_request(
    request_id: UUID,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    trip = await trip_request_service.reject(
        db, request_id=request_id, manager=user, background_tasks=background_tasks
    )
    return APIResponse(message="Trip request rejected", data=trip)
