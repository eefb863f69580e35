"""Central logging configuration for the MiCoach MCP Server."""

import logging
import os
from logging.config import dictConfig

_configured = False

VALID_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _default_config(level: str) -> dict:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
            },
        },
        "handlers": {
            # stdout carries the MCP protocol, so logs go to stderr
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
                "level": level,
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def get_log_level() -> str:
    """Read MICOACH_LOG_LEVEL, falling back to INFO for unknown values."""
    level = os.environ.get("MICOACH_LOG_LEVEL", "INFO").upper()
    if level not in VALID_LEVELS:
        return "INFO"
    return level


def configure_logging() -> None:
    """Configure application logging once per process."""

    global _configured
    if _configured:
        return

    dictConfig(_default_config(get_log_level()))
    _configured = True
    logging.getLogger(__name__).debug("Logging configured")
