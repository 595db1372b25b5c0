"""
Main entrypoint for the Habit Tracker API.

This module assembles the FastAPI application.  ``create_app`` is the
composition root: it sets up logging, creates (or accepts) the
``HabitStore`` that backs every request and includes the versioned
routers.  An instance is created at import time as ``app`` so the
service can be run directly, e.g.::

    uvicorn habit_tracker_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.habit_store import HabitStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[HabitStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[HabitStore]
        Store to serve.  A new, empty store is created when omitted;
        tests pass their own instance to inspect it directly.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log safely.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.habit_store = store if store is not None else HabitStore()

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed requests as 400 Bad Request."""
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    logger.debug("Application created with prefix %r", settings.api_prefix)
    return app


app = create_app()
