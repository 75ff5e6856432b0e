"""Entry point for the FoodieFinds API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``), the store path from ``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from foodie_finds_api.app.core.config import settings
from foodie_finds_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    # Logging is already configured by create_app; keep Uvicorn from replacing it.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info("FoodieFinds API listening at http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
