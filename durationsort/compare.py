"""Duration-aware string ordering.

Strings are compared as text until both reach a digit or "-" at the same
offset behind identical text. From there, if both continue with something
that parses as a duration the durations are compared numerically;
otherwise a single character is compared and the scan moves on.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .constants import CANDIDATE_RE, TOKEN_RE
from .duration import parse_duration
from .exceptions import ParseError


class Extraction(NamedTuple):
    """Result of extracting a duration from the head of a string."""

    duration: int
    rest: str
    ok: bool


def extract_duration(text: str) -> Extraction:
    """Extract the duration prefix of text.

    The token is the longest prefix made of digits, ".", the unit letters
    and a "-" in first position only.

    Returns:
        (duration, remaining text, True), or (0, text, False) if text
        doesn't start with a duration
    """
    end = TOKEN_RE.match(text).end()
    try:
        duration = parse_duration(text[:end])
    except ParseError:
        return Extraction(0, text, False)
    return Extraction(duration, text[end:], True)


def less(a: str, b: str) -> bool:
    """Return True if a sorts before b in duration-aware order."""
    while True:
        ma = CANDIDATE_RE.search(a)
        mb = CANDIDATE_RE.search(b)
        if ma is None or mb is None:
            # nothing left that could be a duration
            return a < b

        i, j = ma.start(), mb.start()
        if a[:i] != b[:j]:
            return a[:i] < b[:j]
        a, b = a[i:], b[j:]

        x, a_rest, a_ok = extract_duration(a)
        y, b_rest, b_ok = extract_duration(b)
        if a_ok and b_ok:
            if x != y:
                return x < y
            a, b = a_rest, b_rest
            continue

        # at least one side isn't a duration: compare one character as text
        if a and b and a[0] != b[0]:
            return a[0] < b[0]
        if not a:
            return True
        if not b:
            return False
        a, b = a[1:], b[1:]


def compare(a: str, b: str) -> int:
    """Three-way duration-aware comparison: -1, 0 or 1."""
    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


class DurationSortKey:
    """Sort key ordering strings in duration-aware order.

    Usable as ``key=`` for ``sorted``, ``list.sort``, ``min`` and ``max``.
    Each ordering test is a single call to less.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __lt__(self, other: DurationSortKey) -> bool:
        return less(self.text, other.text)

    def __gt__(self, other: DurationSortKey) -> bool:
        return less(other.text, self.text)

    def __repr__(self) -> str:
        return f"DurationSortKey({self.text!r})"


def sort_in_place(strings: list[str], *, reverse: bool = False) -> None:
    """Sort a list of strings in duration-aware order."""
    strings.sort(key=DurationSortKey, reverse=reverse)


def sorted_strings(strings: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Return a new list of strings in duration-aware order."""
    return sorted(strings, key=DurationSortKey, reverse=reverse)
