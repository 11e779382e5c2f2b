"""
Logging configuration for the Plants API.

``setup_logging`` reads the level and optional log file from the
application ``Settings`` and installs the handlers on the root logger.
Because it relies on ``logging.basicConfig``, a process that already
has handlers (a second ``create_app`` call, pytest, uvicorn started
with its own config) is left untouched.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(app_settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger from ``app_settings``.

    ``log_level`` is case insensitive; unknown names fall back to
    ``INFO``.  A file handler is added when ``log_file`` is set.
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_handlers(app_settings),
    )
    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s", app_settings.project_name, app_settings.log_level
    )
