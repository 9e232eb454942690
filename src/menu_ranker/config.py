"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nutritionix_app_id: str | None = None
    nutritionix_app_key: str | None = None
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    lookup_timeout_seconds: float = 10.0
    lookup_concurrency: int = 4
    lookup_cache_ttl_seconds: int = 3600
    placeholder_restaurant_names: str = "DoorDash Restaurant"
    nutrition_debug: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def lookup_enabled(self) -> bool:
        """Return True when Nutritionix credentials are configured."""
        return bool(self.nutritionix_app_id and self.nutritionix_app_key)


def parse_placeholder_names(raw: str | None) -> frozenset[str]:
    """Parse comma-separated placeholder restaurant names from env."""
    if raw is None:
        return frozenset()
    names: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            names.add(value)
    return frozenset(names)
