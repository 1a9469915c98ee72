from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.trips.trip_model import generate_uuid


class Participant(Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    trip_id = Column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)

    # Invitees are created with only their email
    name = Column(String, nullable=True)
    email = Column(String, nullable=False)
    is_owner = Column(Boolean, nullable=False, default=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)

    # Insertion order within the trip, owner is always 0
    position = Column(Integer, nullable=False, default=0)

    trip = relationship("Trip", back_populates="participants")
