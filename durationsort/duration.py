"""Duration parsing and formatting.

Durations are plain ``int`` nanosecond counts. On top of the usual
sub-day units (h, m, s, ms, us/µs, ns) the parser understands a leading
``<n>y<n>w<n>d`` prefix, using Julian years of 365.25 days.
"""

from __future__ import annotations

import re

from .constants import (
    DAY_UNIT_TICKS,
    DAY_UNITS,
    HOUR,
    MAX_DURATION,
    MAX_FRACTION_DIGITS,
    MAX_INTEGER_DIGITS,
    MICROSECOND,
    MILLISECOND,
    MIN_DURATION,
    MINUTE,
    SECOND,
    SUBDAY_UNITS,
)
from .exceptions import ParseError

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[-+][0-9]+")
# <number><unit>; the unit runs up to the next digit or decimal point
_SUBDAY_COMPONENT_RE = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)([^0-9.]*)")


def parse_duration(text: str) -> int:
    """Parse a duration such as "1y2w3d4h5m6.5s" into nanoseconds.

    The whole of ``text`` must be a duration. A single leading "-" negates
    the result. y, w and d take unsigned integers, may each appear once and
    only in that order, and must precede any sub-day components.

    Args:
        text: Candidate duration string

    Returns:
        Signed nanosecond count

    Raises:
        ParseError: If text is not a valid duration
    """
    if not text:
        raise ParseError(text, "empty input")

    rest = text
    negative = rest.startswith("-")
    if negative:
        rest = rest[1:]
        if not rest:
            raise ParseError(text, "'-' is not a number")

    total = 0
    units = DAY_UNITS
    while units:
        idx = _index_any(rest, units)
        if idx < 0:
            break
        count, unit, rest = rest[:idx], rest[idx], rest[idx + 1 :]
        total += _parse_count(count, text) * DAY_UNIT_TICKS[unit]
        # a unit may only be followed by smaller ones
        units = DAY_UNITS[DAY_UNITS.index(unit) + 1 :]

    if rest:
        total += _parse_subday(rest, text)

    if negative:
        total = -total
    if not MIN_DURATION <= total <= MAX_DURATION:
        raise ParseError(text, "duration out of range")
    return total


def _index_any(text: str, chars: str) -> int:
    """Return the index of the first character of text found in chars, or -1."""
    found = [i for i in (text.find(c) for c in chars) if i >= 0]
    return min(found) if found else -1


def _parse_count(count: str, text: str) -> int:
    """Parse the unsigned integer in front of a y/w/d unit."""
    if _UNSIGNED_RE.fullmatch(count) is None:
        if _SIGNED_RE.fullmatch(count):
            raise ParseError(text, f"{count!r} is not a positive number")
        raise ParseError(text, f"{count!r} is not a number")
    value = _parse_unsigned(count, text)
    if value > MAX_DURATION:
        raise ParseError(text, f"{count!r} is out of range")
    return value


def _parse_unsigned(digits: str, text: str) -> int:
    """Convert a run of ASCII digits, rejecting runs too long for 64 bits."""
    significant = digits.lstrip("0")
    if len(significant) > MAX_INTEGER_DIGITS:
        raise ParseError(text, f"{digits!r} is out of range")
    return int(significant or "0")


def _parse_subday(rest: str, text: str) -> int:
    """Parse a sequence of <number><unit> pairs with units of at most an hour.

    Returns the (non-negative) nanosecond count. Fractions are truncated
    to whole nanoseconds.
    """
    # a bare zero needs no unit
    if rest == "0":
        return 0

    total = 0
    pos = 0
    while pos < len(rest):
        match = _SUBDAY_COMPONENT_RE.match(rest, pos)
        if match is None:
            raise ParseError(text, f"{rest[pos:]!r} is not a number")
        number, unit = match.groups()
        if not unit:
            raise ParseError(text, f"missing unit after {number!r}")
        ticks = SUBDAY_UNITS.get(unit)
        if ticks is None:
            raise ParseError(text, f"unknown unit {unit!r}")

        whole, _, fraction = number.partition(".")
        total += _parse_unsigned(whole, text) * ticks
        # digits past MAX_FRACTION_DIGITS are below nanosecond resolution
        fraction = fraction[:MAX_FRACTION_DIGITS]
        if fraction:
            total += int(fraction) * ticks // 10 ** len(fraction)
        pos = match.end()
    return total


def format_duration(ticks: int) -> str:
    """Format a nanosecond count as a duration string.

    Examples: 0 -> "0s", 1500 -> "1.5µs", 90s -> "1m30s", 1h -> "1h0m0s".
    Days and longer are expressed in hours.
    """
    if ticks == 0:
        return "0s"

    sign = "-" if ticks < 0 else ""
    magnitude = abs(ticks)

    if magnitude < MICROSECOND:
        return f"{sign}{magnitude}ns"
    if magnitude < MILLISECOND:
        return f"{sign}{_decimal(magnitude, MICROSECOND)}µs"
    if magnitude < SECOND:
        return f"{sign}{_decimal(magnitude, MILLISECOND)}ms"

    hours, remainder = divmod(magnitude, HOUR)
    minutes, remainder = divmod(remainder, MINUTE)
    parts = [sign]
    if magnitude >= HOUR:
        parts.append(f"{hours}h")
    if magnitude >= MINUTE:
        parts.append(f"{minutes}m")
    parts.append(f"{_decimal(remainder, SECOND)}s")
    return "".join(parts)


def _decimal(value: int, unit: int) -> str:
    """Render value/unit as a decimal with trailing zeros trimmed."""
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{fraction:0{width}d}".rstrip("0")
