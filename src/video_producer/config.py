"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Producer backend (generation collaborators)
    producer_api_base_url: str = Field(
        default="http://localhost:5000/api/videos/ai-producer",
        description="Base URL of the generation endpoints",
    )
    producer_api_timeout: float | None = Field(
        default=300.0,
        description="HTTP timeout in seconds for generation calls (empty for no timeout)",
    )
    producer_provider: str = Field(
        default="http",
        description="Generation provider (http, stub)",
    )

    # Pipeline
    pipeline_delay_scale: float = Field(
        default=1.0,
        ge=0.0,
        description="Multiplier for scripted pauses between pipeline steps (0 disables them)",
    )

    # Defaults for briefs that leave them out
    default_voice_style: str = Field(default="professional", description="Default voice style")
    default_voice_gender: str = Field(default="female", description="Default voice gender")
    default_music_mood: str = Field(default="uplifting", description="Default music mood")
    music_force_instrumental: bool = Field(
        default=True,
        description="Ask the music endpoint for instrumental tracks only",
    )

    # Output
    download_dir: str = Field(default="downloads", description="Directory for downloaded videos")

    # In-memory registry
    registry_max_finished: int = Field(
        default=100,
        ge=0,
        description="Finished productions kept in memory before the oldest are dropped",
    )
    registry_max_plans: int = Field(
        default=100,
        ge=1,
        description="Visual plans kept in memory before the oldest are dropped",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# Convenience alias
settings = get_settings()
