from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from app.core.constants import COUNTRIES, DEFAULT_ACCOMMODATION_IMAGE

class AccommodationBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    country: str
    city: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    accommodation: str = Field(..., min_length=1)
    accommodation_type: List[str] = Field(..., min_length=1)
    room_type: List[str] = Field(..., min_length=1)
    num_of_rooms: int = Field(..., ge=1)
    description: str
    facilities: List[str] = []

class AccommodationCreate(AccommodationBase):
    images: Optional[List[str]] = Field(None, validate_default=True)

    @field_validator("country")
    def validate_country(cls, v):
        if v not in COUNTRIES:
            raise ValueError(f"'{v}' is not a supported country")
        return v

    @field_validator("images")
    def default_images(cls, v):
        return v or [DEFAULT_ACCOMMODATION_IMAGE]

class Accommodation(AccommodationBase):
    id: UUID
    images: List[str] = []
    created_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
