"""Application configuration from environment variables."""
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check both backend/ and parent dir
        extra="ignore",
    )

    # Dataset (JSON array of albums, loaded once at startup)
    dataset_path: str = "dataset/discography.json"

    # Cover images
    images_dir: str = "media/images"
    default_cover: str = "default.png"  # Served when an album has no cover

    # iTunes Search API (song previews)
    itunes_search_url: str = "https://itunes.apple.com/search"
    itunes_timeout: float = 10.0
    itunes_result_limit: int = 50

    # Server
    host: str = "127.0.0.1"
    port: int = Field(3000, validation_alias=AliasChoices("PORT", "NODE_PORT"))
    cors_origins: str = "*"

    # Logging
    log_level: str = "info"
    log_path: str = ""

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
