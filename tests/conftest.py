import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.core.database import get_db, Base
from app.services.email_service import MailClient, SentMessage, get_mail_client

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingMailClient(MailClient):
    def __init__(self):
        self.sent = []

    def send_mail(self, sender, to, subject, html):
        self.sent.append({"sender": sender, "to": to, "subject": subject, "html": html})
        return SentMessage(message_id=f"<test-{len(self.sent)}@plann.er>")


class FailingMailClient(MailClient):
    def __init__(self, error: Exception):
        self.error = error

    def send_mail(self, sender, to, subject, html):
        raise self.error


@pytest_asyncio.fixture(scope="function")
async def test_db():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def mail_client():
    return RecordingMailClient()


@pytest_asyncio.fixture(scope="function")
async def client(test_db, mail_client):
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_client] = lambda: mail_client
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def failing_mail_client():
    return FailingMailClient
