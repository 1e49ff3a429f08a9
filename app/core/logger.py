"""
app/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from app.core.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

from app.core.config import settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _resolve_level() -> int:
    """DEBUG wins when the debug flag is on; otherwise honour LOG_LEVEL."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _configure_root_logger() -> None:
    """Attach a single stdout handler to the root logger, once."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by pytest or uvicorn) — leave it alone.
        return

    level = _resolve_level()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))

    root.setLevel(level)
    root.addHandler(handler)

    # Per-request access lines are noise next to our own request logging.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    >>> logger = get_logger(__name__)
    >>> logger.info("Ledger ready")
    """
    return logging.getLogger(name)
