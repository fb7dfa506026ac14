import uuid
from sqlalchemy import Column, String, Integer, DateTime, Enum, JSON, Uuid
from sqlalchemy.dialects import postgresql
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import COUNTRIES, DEFAULT_ACCOMMODATION_IMAGE

# ARRAY on PostgreSQL, JSON everywhere else
StringList = postgresql.ARRAY(String).with_variant(JSON(), "sqlite")

class Accommodation(Base):
    __tablename__ = "accommodations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    country = Column(Enum(*COUNTRIES, name="country_enum"), nullable=False)
    city = Column(String, nullable=False, index=True)
    address = Column(String, nullable=False)
    accommodation = Column(String, nullable=False)
    accommodation_type = Column(StringList, nullable=False)
    room_type = Column(StringList, nullable=False)
    num_of_rooms = Column(Integer, nullable=False)
    description = Column(String, nullable=False)
    facilities = Column(StringList, nullable=False)
    images = Column(StringList, nullable=True, default=lambda: [DEFAULT_ACCOMMODATION_IMAGE])

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
