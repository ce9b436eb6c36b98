"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn social_media_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """Answer undecodable requests with an empty body.

    Malformed JSON, wrongly typed fields and non‑integer path
    parameters are treated like any other rejected input: 401 on the
    login route, 400 everywhere else.
    """
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    if request.url.path == f"{settings.api_prefix}/login":
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix=settings.api_prefix)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and applies migrations.
        init_db()

    return app


app = create_app()
