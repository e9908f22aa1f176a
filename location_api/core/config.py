"""Application configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HIERARCHY_CONFIG_PATH = Path(__file__).parent.parent / "data" / "hierarchy.json"


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    # Hierarchy Settings
    HIERARCHY_CONFIG_PATH: Path = Field(
        default=DEFAULT_HIERARCHY_CONFIG_PATH,
        description="JSON file with the hierarchy rules and next places settings",
    )
    CANONICAL_LANGUAGE: str = "en"  # Names in this language are never looked up

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
