"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "IGC Fitness API"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    # Full URL override (e.g. sqlite:///./igc_fitness.db for local runs)
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REMEMBER_ME_EXPIRE_DAYS: int = 30
    BCRYPT_ROUNDS: int = 10
    MIN_PASSWORD_LENGTH: int = 8

    # Password reset
    RESET_CODE_LENGTH: int = 6
    RESET_CODE_TTL_MINUTES: int = 10
    RESET_HIDE_UNKNOWN_EMAIL: bool = False

    # Email delivery (Resend HTTP API)
    RESEND_API_KEY: str = ""
    RESEND_API_URL: str = "https://api.resend.com/emails"
    MAIL_FROM: str = "IGC Fitness <onboarding@resend.dev>"
    MAIL_TIMEOUT_SECONDS: float = 10.0

    # Profile picture storage
    STORAGE_BACKEND: str = "local"
    MEDIA_ROOT: Path = Path("media")
    MEDIA_URL: str = "/media"
    S3_ENDPOINT_URL: Optional[str] = None
    S3_PUBLIC_URL: Optional[str] = None
    S3_REGION: str = "us-east-1"
    S3_BUCKET: str = "profile-pictures"
    S3_ACCESS_KEY: str = ""
    S3_SECRET_KEY: str = ""
    MAX_PROFILE_PICTURE_BYTES: int = 5 * 1024 * 1024

    # Durable "current_user" slot for the local session
    SESSION_FILE: Path = Path.home() / ".igc_fitness" / "session.json"

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
