"""
Conversion of 12-hour clock strings ("11 PM") into 24-hour integers.
"""

import re
from dataclasses import dataclass
from typing import Optional

_TWELVE_HOUR_PATTERN = re.compile(r"^\s*(\d{1,2})\s*([AaPp][Mm])\s*$")


@dataclass(frozen=True)
class HourParseResult:
    """
    Tagged result of parsing a 12-hour string.

    Exactly one of ``hour`` and ``error`` is set.
    """
    ok: bool
    hour: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, hour: int) -> "HourParseResult":
        return cls(ok=True, hour=hour)

    @classmethod
    def failure(cls, error: str) -> "HourParseResult":
        return cls(ok=False, error=error)


def parse_twelve_hour(value: str) -> HourParseResult:
    """
    Parse an "HH AM/PM" string into an hour of day in [0, 23].

    12 AM is midnight (0) and 12 PM is noon (12). Hours outside [1, 12]
    and suffixes other than AM/PM are rejected.
    """
    if value is None:
        return HourParseResult.failure("No time given")

    match = _TWELVE_HOUR_PATTERN.match(value)
    if not match:
        return HourParseResult.failure(
            f"'{value}' is not in 12 hour time format (HH AM/PM)"
        )

    hour = int(match.group(1))
    suffix = match.group(2).upper()

    if not 1 <= hour <= 12:
        return HourParseResult.failure(f"Hour must be between 1 and 12, got {hour}")

    if suffix == "AM":
        return HourParseResult.success(0 if hour == 12 else hour)
    return HourParseResult.success(12 if hour == 12 else hour + 12)


def format_twelve_hour(hour: int) -> str:
    """Format an hour of day in [0, 23] as "HH AM/PM"."""
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display:02d} {suffix}"
