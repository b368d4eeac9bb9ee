"""durationsort constants."""

from __future__ import annotations

import re

# Tick sizes, in nanoseconds
NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
# Julian year (365.25 days); multiply before dividing to stay exact
JULIAN_YEAR = DAY * (4 * 365 + 1) // 4

# Durations must fit a signed 64-bit nanosecond count
MIN_DURATION = -(1 << 63)
MAX_DURATION = (1 << 63) - 1
# Longest digit runs converted to int: MAX_DURATION has 19 digits, and a
# fraction's 18th digit is already far below one nanosecond of an hour
MAX_INTEGER_DIGITS = len(str(MAX_DURATION))
MAX_FRACTION_DIGITS = 18

# Sub-day units accepted after the y/w/d prefix.
# Both MICRO SIGN (U+00B5) and GREEK SMALL LETTER MU (U+03BC) spell microseconds.
SUBDAY_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# y/w/d units in the only order they may appear
DAY_UNITS = "ywd"
DAY_UNIT_TICKS: dict[str, int] = {"y": JULIAN_YEAR, "w": WEEK, "d": DAY}

# Characters that may start a duration token when scanning a line
CANDIDATE_RE = re.compile(r"[-0-9]")
# A duration-shaped token: optional leading sign, then the token alphabet.
# Only MICRO SIGN is part of the alphabet.
TOKEN_RE = re.compile("-?[0-9.ywdhmsunµ]*")

# CLI defaults
DEFAULT_ENCODING = "utf-8"
STDIO_PATH = "-"

# Exit codes
EXIT_IO_ERROR = 1
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERRUPTED = 130
