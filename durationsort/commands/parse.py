"""durationsort parse command."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import click

from ..constants import EXIT_PARSE_ERROR
from ..duration import format_duration, parse_duration
from ..exceptions import CommandFailureError, ParseError

if TYPE_CHECKING:
    from ..cli_types import ParseArgs

logger = logging.getLogger(__name__)


def parse_result(text: str) -> dict[str, Any]:
    """Parse one duration into a JSON-serializable record.

    Args:
        text: Candidate duration string

    Returns:
        Dict with input, ok, nanoseconds, duration and error keys
    """
    try:
        ticks = parse_duration(text)
    except ParseError as e:
        return {"input": text, "ok": False, "nanoseconds": None, "duration": None, "error": str(e)}
    return {
        "input": text,
        "ok": True,
        "nanoseconds": ticks,
        "duration": format_duration(ticks),
        "error": None,
    }


def cmd_parse(args: ParseArgs) -> None:
    """Print the value of each duration argument.

    Invalid durations are reported on stderr; the command fails once all
    arguments have been processed.
    """
    failures = 0
    for text in args.durations:
        result = parse_result(text)
        if not result["ok"]:
            failures += 1
            logger.debug("Rejected %r: %s", text, result["error"])

        if args.json:
            click.echo(json.dumps(result, sort_keys=True, ensure_ascii=False))
        elif result["ok"]:
            click.echo(f"{text}\t{result['nanoseconds']}\t{result['duration']}")

        if not result["ok"]:
            click.echo(f"ERROR: {result['error']}", err=True)

    if failures:
        raise CommandFailureError(rc=EXIT_PARSE_ERROR)
