"""Structured logging configuration."""

import logging
import sys

from .config import get_settings

LOGGER_NAME = "parsing_strings"


def setup_logging(level: str = "WARNING", log_failures: bool = False) -> logging.Logger:
    """Configure structured logging for the library."""
    logger = logging.getLogger(LOGGER_NAME)
    level_number = getattr(logging, level.upper(), logging.WARNING)
    # Failure records are emitted at DEBUG
    if log_failures:
        level_number = min(level_number, logging.DEBUG)
    logger.setLevel(level_number)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    # Format: timestamp - level - module - message
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def configure_logging() -> logging.Logger:
    """Configure the package logger from the current settings."""
    settings = get_settings()
    return setup_logging(settings.log_level, log_failures=settings.log_failures)


# Global logger instance
logger = configure_logging()


def log_parse_failure(numeric_type: str, outcome: str, text: object) -> None:
    """Log a failed conversion when failure logging is enabled."""
    if not get_settings().log_failures:
        return
    # Settings may have been reloaded since import
    if not logger.isEnabledFor(logging.DEBUG):
        configure_logging()
    logger.debug(f"PARSE type={numeric_type} outcome={outcome} input={text!r}")
