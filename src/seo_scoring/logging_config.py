"""Logging configuration for the SEO scoring engine."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "seo_scoring"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    # stdout is reserved for report output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Configure logging for the command line wrapper.

    The engine's own loggers get the requested level; everything else
    stays at WARNING.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, written in addition to stderr
        format_string: Optional custom format string
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=logging.WARNING,
        format=format_string or DEFAULT_FORMAT,
        handlers=_build_handlers(log_file),
        force=True  # Override any existing configuration
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
