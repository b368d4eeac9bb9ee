"""durationsort exception classes."""

from __future__ import annotations


class DurationSortError(RuntimeError):
    """Base exception for durationsort errors."""


class ParseError(DurationSortError, ValueError):
    """Text could not be parsed as a duration.

    Callers that only want to know whether something is a duration
    treat this as "not a duration" rather than as a failure.
    """

    def __init__(self, text: str, reason: str):
        super().__init__(f"can't parse {text!r} as a duration: {reason}")
        self.text = text
        self.reason = reason


class UserError(DurationSortError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc


class CommandFailureError(DurationSortError):
    """Command failed - error message already printed, just need to exit."""

    def __init__(self, rc: int = 1):
        super().__init__("")
        self.rc = rc
