"""Logging configuration with Rich formatting.

Provides setup_logging() for app initialization and get_logger() for module-level loggers.
"""

import logging
from typing import Optional

from rich.logging import RichHandler


def setup_logging(level: Optional[str] = None):
    if level is None:
        from .config import get_settings
        level = get_settings().log_level

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )

    # Quiet down some noisy libraries; httpx logs full URLs, which carry the token
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str):
    return logging.getLogger(name)
