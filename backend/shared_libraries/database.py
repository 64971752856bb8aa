"""
Database connection configuration and pool construction.
"""

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

DRIVERNAME = "postgresql+asyncpg"


class DatabaseConfig(BaseModel):
    """Connection parameters for the PostgreSQL database."""

    model_config = ConfigDict(frozen=True)

    host: str = "localhost"
    port: int = Field(default=5432, ge=0, le=65535)
    username: str = "app"
    password: str = "passwd"
    database: str = "app"

    def to_url(self) -> URL:
        """Convert into connection options for the async engine.

        Pure conversion; nothing is resolved or contacted here.
        """
        return URL.create(
            DRIVERNAME,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )


def connect_database_with(config: DatabaseConfig, echo: bool = False) -> AsyncEngine:
    """Build the connection pool for ``config``.

    The engine connects lazily: the first checkout opens the first
    connection, so bad hosts or credentials only show up on first query.
    """
    return create_async_engine(config.to_url(), echo=echo)
