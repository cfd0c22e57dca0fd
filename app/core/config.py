"""Application configuration settings."""

import secrets
import typing as t

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "FoodShare"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: t.Literal["development", "production"] = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./foodshare.db"

    # Authentication
    secret_key: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        validation_alias=AliasChoices("ACCESS_TOKEN_SECRET", "SECRET_KEY"),
    )
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 5  # 5 hours
    token_cookie_name: str = "token"

    # Listings
    featured_limit: int = 6

    # CORS
    cors_origins: t.List[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:5175",
        "https://b10a11-food.web.app",
        "https://b10a11-food.firebaseapp.com",
    ]

    @property
    def is_production(self) -> bool:
        """Whether the service runs behind the production deployment."""
        return self.environment == "production"


SETTINGS = Settings()
