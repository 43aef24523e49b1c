"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_store: bool = False
    openai_timeout_seconds: float = 60.0
    recipe_temperature: float = 0.7
    kpi_temperature: float = 0.2
    chat_temperature: float = 0.7
    open_food_facts_base_url: str = "https://world.openfoodfacts.org/api/v0"
    household_timezone: str = "UTC"
    cors_allow_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
