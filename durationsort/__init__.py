"""
durationsort - sort text with embedded durations in numeric order.

"9s" sorts before "10s" and "1d" before "25h": wherever two lines reach
a duration at the same point they are ordered by length of time, and
everywhere else by plain text comparison.
"""

from __future__ import annotations

from .compare import (
    DurationSortKey,
    Extraction,
    compare,
    extract_duration,
    less,
    sort_in_place,
    sorted_strings,
)
from .duration import format_duration, parse_duration
from .exceptions import DurationSortError, ParseError, UserError

__all__ = [
    "DurationSortError",
    "DurationSortKey",
    "Extraction",
    "ParseError",
    "UserError",
    "compare",
    "extract_duration",
    "format_duration",
    "less",
    "parse_duration",
    "sort_in_place",
    "sorted_strings",
]
