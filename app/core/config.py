from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Literal

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./planner.db"
    DATABASE_ECHO: bool = False

    # Host embedded in the confirmation link
    API_BASE_URL: str = "http://localhost:3333"

    # Mail settings
    MAIL_BACKEND: Literal["smtp", "console"] = "console"
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 1025
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_SSL: bool = False
    SMTP_TIMEOUT_SECONDS: float = 10
    MAIL_FROM_NAME: str = "Equipe Plann.Er"
    MAIL_FROM_ADDRESS: str = "team@Plann.er.com"
    MAIL_PREVIEW_BASE_URL: str = ""

    PROJECT_NAME: str = "Plann.er API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Trip planning API"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
