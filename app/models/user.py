import uuid
from sqlalchemy import Boolean, Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    full_name = Column(String, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    is_active = Column(Boolean(), default=True)

    # Approver for this user's trip requests; acyclicity is checked on write, not by the schema.
    line_manager_id = Column(Uuid, ForeignKey("users.id"), nullable=True, index=True)
    email_notification_opt_out = Column(Boolean(), default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    line_manager = relationship("User", remote_side=[id], back_populates="direct_reports")
    direct_reports = relationship("User", back_populates="line_manager")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")
    trip_requests = relationship(
        "TripRequest",
        back_populates="requester",
        foreign_keys="TripRequest.requester_id",
    )
