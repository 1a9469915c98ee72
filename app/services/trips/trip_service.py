from datetime import datetime
from typing import Callable
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import InvalidStartDate, InvalidEndDate
from app.core.logger import logger
from app.models.trips.trip_model import Trip, generate_uuid
from app.models.trips.participant import Participant
from app.schemas.trip.trip_schema import TripCreate
from app.services.email_service import MailClient
from app.services.trips.trip_confirmation_email import (
    generate_confirmation_link,
    render_confirmation_email,
)
from app.utils.dates import format_long_date, is_before, utcnow

class TripService:
    def __init__(self, mail_client: MailClient, config: Settings, now: Callable[[], datetime] = utcnow):
        self.mail_client = mail_client
        self.config = config
        self.now = now

    def _validate_dates(self, trip_data: TripCreate) -> None:
        if is_before(trip_data.starts_at, self.now()):
            logger.warning(f"Rejected trip to {trip_data.destination}: starts_at {trip_data.starts_at.isoformat()} is in the past")
            raise InvalidStartDate()

        if is_before(trip_data.ends_at, trip_data.starts_at):
            logger.warning(f"Rejected trip to {trip_data.destination}: ends_at {trip_data.ends_at.isoformat()} precedes starts_at")
            raise InvalidEndDate()

    @staticmethod
    def _build_trip(trip_data: TripCreate) -> Trip:
        # Owner's name is filled from the email address, matching existing clients
        participants = [
            Participant(
                name=trip_data.owner_email,
                email=trip_data.owner_email,
                is_owner=True,
                is_confirmed=True,
                position=0,
            )
        ]
        participants.extend(
            Participant(email=email, position=index)
            for index, email in enumerate(trip_data.emails_to_invite, start=1)
        )

        return Trip(
            id=generate_uuid(),
            destination=trip_data.destination,
            starts_at=trip_data.starts_at,
            ends_at=trip_data.ends_at,
            participants=participants,
        )

    async def create_trip(self, db: AsyncSession, trip_data: TripCreate) -> str:
        self._validate_dates(trip_data)

        new_trip = self._build_trip(trip_data)
        trip_id = new_trip.id
        db.add(new_trip)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            f"Trip {trip_id} to {trip_data.destination} created with "
            f"{len(trip_data.emails_to_invite)} invitee(s)"
        )

        self._send_confirmation(trip_id, trip_data)
        return trip_id

    def _send_confirmation(self, trip_id: str, trip_data: TripCreate) -> None:
        formatted_start_date = format_long_date(trip_data.starts_at)
        formatted_end_date = format_long_date(trip_data.ends_at)
        confirmation_link = generate_confirmation_link(self.config, trip_id)

        email = render_confirmation_email(
            destination=trip_data.destination,
            formatted_start_date=formatted_start_date,
            formatted_end_date=formatted_end_date,
            confirmation_link=confirmation_link,
        )

        message = self.mail_client.send_mail(
            sender=(self.config.MAIL_FROM_NAME, self.config.MAIL_FROM_ADDRESS),
            to=(trip_data.owner_name, trip_data.owner_email),
            subject=email.subject,
            html=email.html,
        )

        logger.info(f"Confirmation for trip {trip_id} sent to {trip_data.owner_email} ({message.message_id})")
        if message.preview_url:
            logger.info(f"Confirmation preview: {message.preview_url}")
