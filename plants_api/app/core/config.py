"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a deployment, or pass an explicit
``Settings`` instance to ``create_app`` (as the tests do).
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Plants API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "plants.db")

    # Prefix under which the v1 router is mounted.  Empty by default so
    # the plant routes are served from the service root (``/plants``).
    api_prefix: str = os.getenv("API_PREFIX", "")

    # When enabled, get/update/delete of an unknown plant id respond
    # with 404 instead of an empty body or ``null``.
    strict_not_found: bool = _env_flag("STRICT_NOT_FOUND")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Environment variables must be set before importing this module.
settings = Settings()
