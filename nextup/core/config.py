# nextup/core/config.py
from pydantic_settings import BaseSettings
from typing import Optional, Any, List
import secrets


class Settings(BaseSettings):
    PROJECT_NAME: str = "NextUp Presentation API"
    API_PREFIX: str = "/api"

    # Token settings
    SECRET_KEY: str = secrets.token_urlsafe(32)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Database settings
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Teams
    DEFAULT_TOPIC: str = "TBD"

    # Timer defaults
    PRESENTATION_MINUTES: int = 7
    QA_MINUTES: int = 3
    WARNING_SECONDS: int = 120

    # Optional demo account created at start-up
    DEMO_USER_EMAIL: Optional[str] = None
    DEMO_USER_PASSWORD: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **data: Any):
        super().__init__(**data)

        # Construct DB URI if not provided directly
        if not self.SQLALCHEMY_DATABASE_URI:
            if self.POSTGRES_SERVER and self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_DB:
                self.SQLALCHEMY_DATABASE_URI = (
                    f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                    f"@{self.POSTGRES_SERVER}/{self.POSTGRES_DB}"
                )
            else:
                # Default to SQLite if PostgreSQL settings are not complete
                self.SQLALCHEMY_DATABASE_URI = "sqlite:///./nextup.db"


settings = Settings()
