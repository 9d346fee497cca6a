"""Duration parsing utilities."""

import re
from datetime import timedelta

from stampede.types import Duration

_DURATION_PATTERN = re.compile(r"^(\d+)(ms|s|m|h|d)$")
_UNITS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


def parse_duration(duration: Duration) -> int:
    """Parse a duration to milliseconds.

    Integers pass through, timedeltas are floored to whole milliseconds.
    Negative durations are rejected.
    """
    if isinstance(duration, timedelta):
        duration = duration // timedelta(milliseconds=1)

    if isinstance(duration, int):
        if duration < 0:
            raise ValueError(f"Duration must be non-negative: {duration!r}")
        return duration

    match = _DURATION_PATTERN.match(duration)
    if not match:
        raise ValueError(f"Invalid duration: {duration!r}")

    value, unit = match.groups()
    return int(value) * _UNITS[unit]
