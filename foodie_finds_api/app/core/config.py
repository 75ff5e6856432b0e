"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields: port
3000, the ``FoodieFinds/database.sqlite`` store and CORS open to every
origin.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "FoodieFinds API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")
    # Level of the per‑request ``uvicorn.access`` lines; empty follows LOG_LEVEL.
    access_log_level: str = os.getenv("ACCESS_LOG_LEVEL", "")

    # Path to the SQLite store.  A relative path is resolved against the
    # project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "FoodieFinds/database.sqlite")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of allowed origins, ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
