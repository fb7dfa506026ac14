from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from app.core.database import get_db
from app.models.user import User
from app.schemas.accommodation import Accommodation, AccommodationCreate
from app.schemas.response import APIResponse
from app.services.accommodation import accommodation_service
from app.utils import deps

router = APIRouter()

@router.post("", response_model=APIResponse[Accommodation], status_code=status.HTTP_201_CREATED)
async def create_accommodation(
    accommodation_in: AccommodationCreate,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    data = accommodation_service.create_accommodation(db, accommodation_in=accommodation_in)
    return APIResponse(message="Accommodation created successfully", data=data)

@router.get("", response_model=APIResponse[List[Accommodation]])
async def list_accommodations(
    city: Optional[str] = None,
    country: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    data = accommodation_service.list_accommodations(db, city=city, country=country, skip=skip, limit=limit)
    return APIResponse(message="Accommodations fetched successfully", data=data)

@router.get("/{accommodation_id}", response_model=APIResponse[Accommodation])
async def get_accommodation(
    accommodation_id: UUID,
    db: Session = Depends(get_db),
    user: User = Depends(deps.get_current_user)
):
    data = accommodation_service.get_accommodation(db, accommodation_id=accommodation_id)
    return APIResponse(message="Accommodation fetched successfully", data=data)
