import uuid
from sqlalchemy import Column, String, Date, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import TripTypeEnum, RequestStatusEnum

class TripRequest(Base):
    __tablename__ = "requests"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    requester_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(
        Enum(TripTypeEnum, name="trip_type_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    origin_city = Column(String, nullable=False)
    destination_city = Column(String, nullable=False)
    departure_date = Column(Date, nullable=False)
    return_date = Column(Date, nullable=True)
    reason = Column(String, nullable=False)
    accommodation_id = Column(Uuid, ForeignKey("accommodations.id"), nullable=True)
    status = Column(
        Enum(RequestStatusEnum, name="request_status_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=RequestStatusEnum.PENDING,
        index=True,
    )
    decided_by_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    decided_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    requester = relationship("User", back_populates="trip_requests", foreign_keys=[requester_id])
    decided_by = relationship("User", foreign_keys=[decided_by_id])
    accommodation = relationship("Accommodation", lazy="joined")
