"""
Main entrypoint for the UCSB Records API.

This module assembles the FastAPI application, sets up logging,
registers the not-found error handler and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn ucsb_records_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import EntityNotFoundError, entity_not_found_handler
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below may log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix=settings.api_prefix)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file and any missing tables.
        init_db()

    return app


app = create_app()
