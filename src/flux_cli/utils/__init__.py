"""Shared utilities."""

from .duration import format_duration, parse_duration
from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "format_duration", "get_logger", "parse_duration"]
