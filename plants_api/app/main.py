"""
Main entrypoint for the Plants API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn plants_api.app.main:app --reload

The application title, version and database location are provided via
``Settings`` from ``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import Database
from .core.exceptions import StorageError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Turn database failures into a 500 response."""
    logger.error(
        "Storage error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage error"},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The database
        handle is available as ``app.state.db``; the ``PLANTS`` table
        is created when the application starts.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    db = Database.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.init_db()
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.db = db
    app.state.settings = app_settings

    app.add_exception_handler(StorageError, storage_error_handler)
    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


app = create_app()
