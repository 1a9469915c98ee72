from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.trip.trip_schema import TripCreate, TripCreateResponse
from app.core.config import settings
from app.core.database import get_db
from app.services.email_service import MailClient, get_mail_client
from app.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=['Trips'])

async def get_trip_service(
    mail_client: MailClient = Depends(get_mail_client)
) -> TripService:
    return TripService(mail_client, settings)

@router.post("", response_model=TripCreateResponse)
async def create_trip_route(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    trip_id = await trip_service.create_trip(db, trip)
    return TripCreateResponse(trip_id=trip_id)
