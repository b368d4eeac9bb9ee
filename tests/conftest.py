"""Shared pytest fixtures for durationsort tests."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo handlers and levels installed by setup_logging during a test."""
    logger = logging.getLogger("durationsort")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in original_handlers:
        logger.addHandler(handler)
    logger.setLevel(original_level)


@pytest.fixture
def sample_lines() -> list[str]:
    """Unsorted log-style lines with embedded durations."""
    return [
        "job build took 10s",
        "job build took 9s",
        "job deploy took 1h",
        "job build took 1m30s",
        "job deploy took 25h",
        "job deploy took 1d",
        "job build took 500ms",
    ]


@pytest.fixture
def sample_file(tmp_dir: Path, sample_lines: list[str]) -> Path:
    """Write sample_lines to a file, one per line."""
    path = tmp_dir / "durations.txt"
    path.write_text("".join(f"{line}\n" for line in sample_lines), encoding="utf-8")
    return path
