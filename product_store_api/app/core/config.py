"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  In a real
deployment you should at least override ``API_KEY``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Shared secret expected in the ``x-api-key`` header of every
    # ``/api/products`` request.
    api_key: str = os.getenv("API_KEY", "your-secret-api-key")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Pagination defaults used when ``page`` or ``limit`` are missing or
    # not numeric.
    default_page: int = int(os.getenv("DEFAULT_PAGE", "1"))
    default_limit: int = int(os.getenv("DEFAULT_LIMIT", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
