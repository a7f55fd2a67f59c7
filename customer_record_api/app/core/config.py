"""
Runtime configuration for the Customer Record API.

``Settings`` is a plain dataclass populated from environment variables
so that the service can be configured without extra dependencies.
Every field has a default suitable for local development; the most
common override is ``PORT``.  Tests construct their own ``Settings``
instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer Record API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``; ``:memory:`` is passed
    # through unchanged.
    database_url: str = os.getenv("DATABASE_URL", "customers.db")

    # Comma-separated list of origins allowed by the CORS middleware.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )


# Shared instance.  Environment variables must be set before this module
# is first imported.
settings = Settings()
