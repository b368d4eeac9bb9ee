"""durationsort utility functions."""

from __future__ import annotations

from collections.abc import Iterable

import click

from .constants import DEFAULT_ENCODING, EXIT_IO_ERROR, STDIO_PATH
from .exceptions import UserError


def describe_path(path: str, stream_name: str) -> str:
    """Return a human-readable name for a path, where "-" is a standard stream."""
    return stream_name if path == STDIO_PATH else path


def read_lines(
    path: str, *, encoding: str = DEFAULT_ENCODING, skip_blank: bool = False
) -> list[str]:
    """Read newline-delimited records from a file or stdin.

    Args:
        path: File to read, or "-" for stdin
        encoding: Text encoding of the input
        skip_blank: Drop whitespace-only lines

    Returns:
        Lines with their trailing newline removed

    Raises:
        UserError: If the input can't be opened, read or decoded
    """
    try:
        with click.open_file(path, "r", encoding=encoding) as f:
            lines = [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        message = f"Error reading {describe_path(path, 'stdin')}: {e}"
        raise UserError(message, rc=EXIT_IO_ERROR) from e

    if skip_blank:
        lines = [line for line in lines if line.strip()]
    return lines


def write_lines(path: str, lines: Iterable[str], *, encoding: str = DEFAULT_ENCODING) -> None:
    """Write each line followed by a newline to a file or stdout.

    Raises:
        UserError: If the output can't be opened, written or encoded
    """
    try:
        with click.open_file(path, "w", encoding=encoding) as f:
            for line in lines:
                f.write(line)
                f.write("\n")
            # "-" is not closed on exit
            f.flush()
    except (OSError, UnicodeEncodeError) as e:
        message = f"Error writing {describe_path(path, 'stdout')}: {e}"
        raise UserError(message, rc=EXIT_IO_ERROR) from e
