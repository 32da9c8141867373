"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TODOLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backing file used when no path is given
    todo_file: Path = Path("todo.txt")

    # Section that `add` files tasks under when none is given
    default_section: str = "Tasks"

    debug: bool = False


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
