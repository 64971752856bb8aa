"""
Pytest configuration and async fixtures.
"""

import asyncio
import sys
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

# Add project root to sys.path
sys.path.insert(0, str(__file__).rsplit("/", 2)[0])

from services.health_api.main import create_app
from shared_libraries.config import get_settings
from shared_libraries.database import DatabaseConfig, connect_database_with


class _StubResult:
    def one(self) -> tuple[int]:
        return (1,)


class _StubConnection:
    def __init__(self, error: Exception | None) -> None:
        self.error = error

    async def __aenter__(self) -> "_StubConnection":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    async def execute(self, statement):
        # Yield to the loop so concurrent probes interleave
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return _StubResult()


class StubEngine:
    """Stands in for an AsyncEngine; ``error`` is raised by every query."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.checkouts = 0

    def connect(self) -> _StubConnection:
        self.checkouts += 1
        return _StubConnection(self.error)


@pytest.fixture
async def unreachable_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Pool pointing at a closed loopback port."""
    engine = connect_database_with(DatabaseConfig(host="127.0.0.1", port=1))
    yield engine
    await engine.dispose()


@pytest.fixture
async def live_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Pool for the configured database; skips when nothing answers."""
    engine = connect_database_with(get_settings().database_config)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:
        await engine.dispose()
        pytest.skip(f"database not reachable: {type(exc).__name__}")
    yield engine
    await engine.dispose()


@pytest.fixture
def client_for() -> Callable[[object], AsyncClient]:
    """Factory building an async client around an app serving ``engine``."""

    def _make(engine) -> AsyncClient:
        app = create_app(engine)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _make


@pytest.fixture
def stub_engine() -> type[StubEngine]:
    """The ``StubEngine`` class, for tests that need a pool without a server."""
    return StubEngine
