from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.accommodation import Accommodation
from app.schemas.accommodation import AccommodationCreate, AccommodationBase

class CRUDAccommodation(CRUDBase[Accommodation, AccommodationCreate, AccommodationBase]):
    def get_filtered(
        self, db: Session, *, city: Optional[str] = None, country: Optional[str] = None,
        skip: int = 0, limit: int = 100
    ) -> List[Accommodation]:
        query = db.query(self.model)
        if city:
            query = query.filter(self.model.city.ilike(city))
        if country:
            query = query.filter(self.model.country == country)
        return query.order_by(self.model.created_at.desc()).offset(skip).limit(limit).all()

accommodation = CRUDAccommodation(Accommodation)
