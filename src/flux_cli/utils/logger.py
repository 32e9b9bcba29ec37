"""Logging configuration."""

import logging
from typing import Optional

PACKAGE_LOGGER = "flux_cli"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance.

    Module loggers propagate to the package logger, which owns the handler.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    # Only configure if no handlers exist
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.WARNING)
        package_logger.propagate = False

    return logging.getLogger(name or PACKAGE_LOGGER)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Set the package log level: DEBUG when verbose, WARNING otherwise."""
    logger = get_logger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
