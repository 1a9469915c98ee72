from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List
from datetime import datetime
from app.utils.dates import from_epoch_millis, to_utc

class TripCreate(BaseModel):
    destination: str = Field(min_length=4)
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: EmailStr
    emails_to_invite: List[EmailStr]

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def coerce_date(cls, value):
        return from_epoch_millis(value)

    @field_validator("starts_at", "ends_at")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return to_utc(value)

class TripCreateResponse(BaseModel):
    trip_id: str = Field(alias="tripId")

    model_config = {
        "populate_by_name": True
    }
