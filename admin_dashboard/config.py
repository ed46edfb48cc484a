"""Application configuration."""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "default-jwt-secret-key"


class Settings(BaseSettings):
    """Application settings.

    Environment variables take precedence over .env file.
    Every value has a default so the service starts without any
    configuration, but the default JWT secret is not safe for production.
    """

    APP_NAME: str = "Admin Dashboard"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./admin_dashboard.db"

    # JWT Settings
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY: int = 24  # hours

    # Role names allowed to modify users, roles, divisions and positions
    ADMIN_ROLES: List[str] = ["admin"]

    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET


settings = Settings()
