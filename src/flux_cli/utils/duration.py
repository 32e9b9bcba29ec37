"""Go-style duration parsing for the --timeout flag."""

import re

from ..errors import UsageError

_UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 0.001,
    "us": 0.000001,
    "µs": 0.000001,
    "ns": 0.000000001,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(h|ms|m|s|us|µs|ns)")


def parse_duration(value: str) -> float:
    """Parse a duration such as ``5m0s``, ``90s`` or ``1.5h`` into seconds.

    A bare ``0`` is accepted, as Go does. Anything else without a unit is rejected.
    """
    text = value.strip()
    if text == "0":
        return 0.0

    position = 0
    total = 0.0
    for match in _COMPONENT.finditer(text):
        if match.start() != position:
            break
        number, unit = match.groups()
        total += float(number) * _UNIT_SECONDS[unit]
        position = match.end()

    if not text or position != len(text):
        raise UsageError(f'invalid duration "{value}"')

    return total


def format_duration(seconds: float) -> str:
    """Format seconds as a kubectl ``--request-timeout`` value."""
    if seconds == int(seconds):
        return f"{int(seconds)}s"
    return f"{int(round(seconds * 1000))}ms"
