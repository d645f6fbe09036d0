"""Centralized logging configuration."""

import logging
import os
import sys
from typing import Optional

FORMATS = {
    "standard": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
}


def setup_logging(
    level: Optional[str] = None,
    format_style: str = "standard",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); falls back to the
            LOG_LEVEL environment variable, then WARNING
        format_style: 'standard' for humans, 'json' for log shippers
        log_file: Optional file path to write logs

    Returns:
        Root logger
    """
    level = level or os.environ.get("LOG_LEVEL", "WARNING")
    if format_style not in FORMATS:
        raise ValueError(f"Unknown log format: '{format_style}'")

    # Logs go to stderr so command output stays clean
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=FORMATS[format_style],
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,  # Override any existing config
    )

    return logging.getLogger()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Usage:
        from core.utils.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
