"""
Configuration management for User Service.
"""

from typing import List, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeedUser(BaseModel):
    """User loaded into the repository at startup."""

    id: int
    name: str


class Settings(BaseSettings):
    """
    Application settings.

    All settings can be overridden via environment variables.
    """

    # Service Configuration
    SERVICE_NAME: str = Field(default="user-service")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=True)

    # Initial repository contents, as JSON in the environment:
    # SEED_USERS='[{"id": 1, "name": "John Doe"}]'
    SEED_USERS: List[SeedUser] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
