"""Logging configuration for the application."""

import logging
import sys
from typing import TextIO

from app.core.config import get_settings


def setup_logging(stream: TextIO | None = None) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout unless another stream is given (scripts that print
    JSON to stdout log to stderr).
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    # SQL echo is controlled by DATABASE_ECHO, not by debug.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
