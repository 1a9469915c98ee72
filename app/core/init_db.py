from app.core.database import engine, Base
from app.models import Trip, Participant  # noqa: F401  registers tables on Base.metadata

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
