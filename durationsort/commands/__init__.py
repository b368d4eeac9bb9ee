"""durationsort command implementations."""

from __future__ import annotations

from .parse import cmd_parse
from .sort import cmd_sort

__all__ = [
    "cmd_parse",
    "cmd_sort",
]
