"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_ENCODING, STDIO_PATH


@dataclass
class SortArgs:
    """Arguments for sort command."""

    files: list[str] = field(default_factory=lambda: [STDIO_PATH])
    output: str = STDIO_PATH
    reverse: bool = False
    skip_blank: bool = False
    encoding: str = DEFAULT_ENCODING


@dataclass
class ParseArgs:
    """Arguments for parse command."""

    durations: list[str]
    json: bool = False
