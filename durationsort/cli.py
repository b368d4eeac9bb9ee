"""durationsort CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import ParseArgs, SortArgs
from .commands import cmd_parse, cmd_sort
from .constants import DEFAULT_ENCODING, EXIT_INTERRUPTED, EXIT_USAGE_ERROR, STDIO_PATH
from .exceptions import CommandFailureError, DurationSortError, UserError

# Module logger
logger = logging.getLogger("durationsort")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("durationsort"), prog_name="durationsort")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """durationsort: sort lines treating embedded durations (9s, 1h30m, 2d) as numbers."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("sort")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=STDIO_PATH,
    show_default=True,
    help="Write sorted lines to this file ('-' for stdout).",
)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort in descending order.",
)
@click.option(
    "--skip-blank",
    is_flag=True,
    help="Drop whitespace-only lines before sorting.",
)
@click.option(
    "--encoding",
    default=DEFAULT_ENCODING,
    show_default=True,
    help="Text encoding of input and output.",
)
def sort_lines(
    files: tuple[str, ...],
    output: str,
    reverse: bool,
    skip_blank: bool,
    encoding: str,
):
    """Sort lines from FILES (or stdin) in duration-aware order.

    Runs of text are compared as text; durations such as 500ms, 1h30m or
    1y2w are compared by length of time, so 9s sorts before 10s and 1d
    before 25h.
    """
    args = SortArgs(
        files=list(files) if files else [STDIO_PATH],
        output=output,
        reverse=reverse,
        skip_blank=skip_blank,
        encoding=encoding,
    )
    cmd_sort(args)


@cli.command("parse")
@click.argument("durations", nargs=-1, required=True, metavar="DURATION...")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Emit machine-readable JSON to stdout.",
)
def parse(durations: tuple[str, ...], json_output: bool):
    """Print the value of each DURATION in nanoseconds.

    Accepts y, w and d (as integers, in that order) followed by
    h, m, s, ms, us/µs and ns. Use '--' before negative durations.
    """
    args = ParseArgs(durations=list(durations), json=json_output)
    cmd_parse(args)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except CommandFailureError as e:
        # Command already printed its error message, just exit
        sys.exit(e.rc)
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except DurationSortError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(EXIT_USAGE_ERROR)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(EXIT_INTERRUPTED)
