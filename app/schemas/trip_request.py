from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from app.core.constants import TripTypeEnum, RequestStatusEnum
from app.schemas.accommodation import Accommodation

class TripRequestBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: TripTypeEnum
    origin_city: str = Field(..., min_length=1)
    destination_city: str = Field(..., min_length=1)
    departure_date: date
    return_date: Optional[date] = None
    reason: str = Field(..., min_length=1)

class TripRequestCreate(TripRequestBase):
    accommodation_id: Optional[UUID] = None

    @model_validator(mode="after")
    def check_itinerary(self):
        if self.origin_city.strip().lower() == self.destination_city.strip().lower():
            raise ValueError("Origin and destination cities must differ")
        if self.type == TripTypeEnum.ROUND_TRIP and self.return_date is None:
            raise ValueError("A round trip requires a return date")
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValueError("Return date cannot be before the departure date")
        return self

class TripRequest(TripRequestBase):
    id: UUID
    requester_id: UUID
    status: RequestStatusEnum
    accommodation_id: Optional[UUID] = None
    accommodation: Optional[Accommodation] = None
    decided_by_id: Optional[UUID] = None
    decided_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
