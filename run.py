"""Entry point for the String Service API.

Serves the API with Uvicorn on ``0.0.0.0:8080``.  The address is
fixed; if the port cannot be bound Uvicorn logs the error and the
process exits with a non-zero status.

Logging verbosity can be changed through the ``LOG_LEVEL`` variable,
optionally placed in the environment before launching.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from string_service_api.app.core.config import settings
from string_service_api.app.core.logging_config import PACKAGE_LOGGER
from string_service_api.app.main import app


async def main() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(f"{PACKAGE_LOGGER}.run").info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
