from sqlalchemy import Column, String, Boolean, DateTime, func
from app.core.database import Base
from sqlalchemy.orm import relationship
import uuid

def generate_uuid() -> str:
    return str(uuid.uuid4())

class Trip(Base):
    __tablename__ = "trips"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    destination = Column(String, nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    participants = relationship(
        "Participant",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Participant.position",
    )
