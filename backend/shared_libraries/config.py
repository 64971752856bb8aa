"""
Shared configuration for the health service.
Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_libraries.database import DatabaseConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "app"
    postgres_password: str = "passwd"
    postgres_db: str = "app"

    @property
    def database_config(self) -> DatabaseConfig:
        """Build the connection configuration from the postgres fields."""
        return DatabaseConfig(
            host=self.postgres_host,
            port=self.postgres_port,
            username=self.postgres_user,
            password=self.postgres_password,
            database=self.postgres_db,
        )

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8080

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
