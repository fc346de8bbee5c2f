"""HomeDirect Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60 * 24 * 30

    # Timezone
    TIMEZONE: str = "Europe/Kyiv"

    # Email verification
    VERIFICATION_CODE_TTL_MINUTES: int = 30  # 0 disables expiry

    # Notifier
    NOTIFIER: str = "log"  # "log" or "http"
    MAIL_API_URL: str = "http://localhost:8025"
    MAIL_API_KEY: str = ""
    MAIL_FROM: str = "no-reply@homedirect.local"

    # Seeded administrator
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = "admin@homedirect.local"
    ADMIN_PASSWORD: str = "change-me-admin"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
