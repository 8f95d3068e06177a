"""Application configuration."""

import os

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fussyfood.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    foods_table: str = "foods"
    food_allergies_table: str = "food_allergies"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def load_settings() -> Settings:
    """Load settings, reporting missing variables as a configuration error."""
    try:
        return Settings()
    except ValidationError as exc:
        missing = sorted(
            str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]
        )
        raise ConfigurationError(
            "Invalid Food Store configuration; check " + ", ".join(missing)
        ) from exc
