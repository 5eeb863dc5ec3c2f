"""
Main entrypoint for the String Service API.

This module assembles the FastAPI application, sets up logging and
includes the route table.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn string_service_api.app.main:app --port 8080

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import router

logger = logging.getLogger(__name__)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer with a plain 500."""
    logger.exception("Unhandled error while serving %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the fallback error handler and
    mounts the ``/uppercase`` and ``/count`` routes at the root.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.add_exception_handler(Exception, generic_error_handler)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
