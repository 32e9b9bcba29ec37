"""Exceptions surfaced to the command line."""


class FluxCliError(Exception):
    """Base class for errors reported to the user."""


class UsageError(FluxCliError):
    """Invalid arguments or flags."""


class ReconciliationError(FluxCliError):
    """A resource reported a failed Ready condition."""


class WaitTimeoutError(FluxCliError):
    """A resource did not become ready before the deadline."""
