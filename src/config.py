"""Configuration management for the application."""

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="mysql+pymysql://root:@localhost:3306/ecommerce_db")
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)
    db_pool_timeout: int = Field(default=30, ge=1)  # seconds
    auto_create_tables: bool = Field(default=True)

    # Passwords
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # API
    cors_origins: list[str] = Field(default=["*"])
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # None means "follow the environment": driver messages are shown in development only
    expose_db_errors: bool | None = Field(default=None)

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.bcrypt_rounds < 10:
                raise ValueError("BCRYPT_ROUNDS must be at least 10 in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def show_db_errors(self) -> bool:
        """Whether database driver messages may be returned to clients."""
        if self.expose_db_errors is not None:
            return self.expose_db_errors
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str) -> None:
    """Configure root logging once at application start."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
