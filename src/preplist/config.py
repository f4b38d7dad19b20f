"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SpoonStyle = Literal["name", "quantity"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PREPLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Document adapter
    method_list_selector: str = "article ul li"
    prep_list_container: str = "article"
    prep_list_heading: str = "Ingredients!"

    # Formatting
    # "name" renders spoon and pinch amounts as the title-cased name only,
    # "quantity" keeps the "1/2 tsp salt" / "A pinch of salt" form.
    spoon_style: SpoonStyle = "name"

    # Fetching recipe pages
    fetch_timeout: float = 30.0  # request timeout in seconds
    fetch_max_retries: int = 3

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
