# dental_clinic/config.py
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and an optional .env file."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    APP_NAME: str = "Dental Clinic API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    DATABASE_URL: str = "sqlite:///./dental_clinic.db"
    DATABASE_ECHO: bool = False

    # Comma-separated; CORS_ORIGINS is accepted as well
    ALLOWED_ORIGINS: str = Field(default="*", validation_alias=AliasChoices("ALLOWED_ORIGINS", "CORS_ORIGINS"))
    GZIP_MIN_SIZE: int = 500  # bytes

    # Minutes assumed for an appointment that does not state its length,
    # both when storing it and when checking other bookings against it
    DEFAULT_APPOINTMENT_DURATION: int = Field(default=30, gt=0, le=24 * 60)

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def allowed_origins_list(self) -> List[str]:
        return [item.strip() for item in self.ALLOWED_ORIGINS.split(",") if item.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
