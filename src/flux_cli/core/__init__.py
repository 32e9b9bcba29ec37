"""Core formatting logic."""

from .reporter import StatusReporter

__all__ = ["StatusReporter"]
