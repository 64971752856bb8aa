"""Health check endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from shared_libraries.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def get_engine(request: Request) -> AsyncEngine:
    """Dependency returning the connection pool shared by the application."""
    return request.app.state.engine


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Response:
    """Liveness check. Never touches the database."""
    return Response(status_code=status.HTTP_200_OK)


@router.get("/health_db", status_code=status.HTTP_200_OK)
async def health_check_db(engine: AsyncEngine = Depends(get_engine)) -> Response:
    """Readiness check: runs ``SELECT 1`` once against the pool.

    Any failure (refused connection, rejected credentials, timeout, query
    error) is reported as 500 with no detail.
    """
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.one()
    except Exception as exc:
        logger.warning("database_probe_failed", error_type=type(exc).__name__)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_200_OK)
