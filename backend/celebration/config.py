"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./celebration.db"
    CORS_ORIGINS: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Photo bucket
    MEDIA_ROOT: str = "./media"
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    PHOTO_BUCKET: str = "memories"
    PHOTO_FOLDER: str = "memories"
    MAX_PHOTO_BYTES: int = 10485760  # 10MB
    PHOTO_PLACEHOLDER_URL: str = "https://example.com/mock-image-{timestamp}.{ext}"

    # Client side
    API_BASE_URL: str = "http://localhost:8000"
    LOCAL_CACHE_PATH: str = "./celebration_cache.json"
    ADMIN_PASSPHRASE: str = "98760"

    # Event
    EVENT_NAME: str = "Permanent Residency Celebration"
    EVENT_STARTS_AT: str = "2025-05-17T17:00:00"
    EVENT_TIMEZONE: str = "UTC"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
