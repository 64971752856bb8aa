"""
Health API - liveness and database readiness probes.

Serves ``/health`` and ``/health_db`` on the loopback interface.
"""

import socket

import uvicorn
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from services.health_api.routes import health
from shared_libraries.config import get_settings
from shared_libraries.database import connect_database_with
from shared_libraries.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(engine: AsyncEngine) -> FastAPI:
    """Build the application with ``engine`` as shared state."""
    app = FastAPI(
        title="DB Health Service",
        description="Liveness and database readiness probes.",
        version="1.0.0",
    )
    app.state.engine = engine
    app.include_router(health.router, tags=["System"])
    return app


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def main() -> None:
    settings = get_settings()
    setup_logging(service_name="health-api", log_level=settings.log_level)

    # No connection is opened until the first /health_db request
    engine = connect_database_with(settings.database_config, echo=settings.debug)
    app = create_app(engine)

    try:
        sock = bind_socket(settings.api_host, settings.api_port)
    except OSError as exc:
        logger.error(
            "bind_failed",
            host=settings.api_host,
            port=settings.api_port,
            error=str(exc),
        )
        raise

    host, port = sock.getsockname()[:2]
    logger.info("listening", address=f"{host}:{port}")

    config = uvicorn.Config(app=app, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
