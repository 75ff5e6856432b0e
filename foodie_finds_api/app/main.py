"""
Main entrypoint for the FoodieFinds API.

This module assembles the FastAPI application, sets up logging, CORS
and the shared store connection, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn foodie_finds_api.app.main:app --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import settings
from .core.db import close_store, open_store
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is opened
        by its startup handler, so requests are only served once the
        connection exists.
    """
    setup_logging(settings.log_level, settings.log_file or None, settings.access_log_level or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        open_store()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_store()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
