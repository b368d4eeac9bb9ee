"""durationsort sort command."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ..compare import sort_in_place
from ..utils import read_lines, write_lines

if TYPE_CHECKING:
    from ..cli_types import SortArgs

logger = logging.getLogger(__name__)


def cmd_sort(args: SortArgs) -> None:
    """Read records from every input, sort them by duration and write them out."""
    lines: list[str] = []
    for path in args.files:
        chunk = read_lines(path, encoding=args.encoding, skip_blank=args.skip_blank)
        logger.debug("Read %d lines from %s", len(chunk), path)
        lines.extend(chunk)

    start_time = time.time()
    sort_in_place(lines, reverse=args.reverse)
    logger.debug("Sorted %d lines in %.3fs", len(lines), time.time() - start_time)

    write_lines(args.output, lines, encoding=args.encoding)
