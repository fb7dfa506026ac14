from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.database import persistence_errors
from app.core.exceptions import NotFoundError
from app.crud.accommodation import accommodation as crud_accommodation
from app.models.accommodation import Accommodation
from app.schemas.accommodation import AccommodationCreate

class AccommodationService:
    def create_accommodation(self, db: Session, *, accommodation_in: AccommodationCreate) -> Accommodation:
        with persistence_errors(db, "create accommodation"):
            return crud_accommodation.create(db, obj_in=accommodation_in)

    def list_accommodations(
        self, db: Session, *, city: Optional[str] = None, country: Optional[str] = None,
        skip: int = 0, limit: int = 100
    ) -> List[Accommodation]:
        with persistence_errors(db, "list accommodations"):
            return crud_accommodation.get_filtered(db, city=city, country=country, skip=skip, limit=limit)

    def get_accommodation(self, db: Session, *, accommodation_id: UUID) -> Accommodation:
        with persistence_errors(db, "get accommodation"):
            accommodation = crud_accommodation.get(db, id=accommodation_id)
        if accommodation is None:
            raise NotFoundError("accommodation", accommodation_id)
        return accommodation

accommodation_service = AccommodationService()
