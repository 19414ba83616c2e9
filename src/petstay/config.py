"""Server settings, loaded from the environment (and an optional .env file)."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from petstay.services.static_files import DEFAULT_CONTENT_TYPES, DEFAULT_INDEX_DOCUMENT
from petstay.services.stay_policy import DEFAULT_MIN_LEAD_DAYS
from petstay.services.submission import DEFAULT_MAX_BODY_BYTES

PACKAGE_STATIC_ROOT = Path(__file__).resolve().parent / "static"

# Keeps today + lead time well inside the range datetime.date can represent
MAX_MIN_LEAD_DAYS = 3650


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PETSTAY_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "PETSTAY_PORT"))
    log_level: str = "INFO"

    # Static site
    static_root: Path = PACKAGE_STATIC_ROOT
    index_document: str = DEFAULT_INDEX_DOCUMENT
    content_types: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CONTENT_TYPES))

    # Reservations
    reservation_log: Path = Path("reservations.ndjson")
    min_lead_days: int = Field(default=DEFAULT_MIN_LEAD_DAYS, ge=0, le=MAX_MIN_LEAD_DAYS)
    max_body_bytes: int = Field(default=DEFAULT_MAX_BODY_BYTES, gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
