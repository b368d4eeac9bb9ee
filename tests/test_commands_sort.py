"""Tests for durationsort/commands/sort.py - sort command."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from durationsort.cli_types import SortArgs
from durationsort.commands.sort import cmd_sort
from durationsort.exceptions import UserError

SORTED_SAMPLE = [
    "job build took 500ms",
    "job build took 9s",
    "job build took 10s",
    "job build took 1m30s",
    "job deploy took 1h",
    "job deploy took 1d",
    "job deploy took 25h",
]


class TestCmdSort:
    """Tests for cmd_sort function."""

    def test_sorts_file_to_file(self, sample_file: Path, tmp_dir: Path):
        out = tmp_dir / "out.txt"
        cmd_sort(SortArgs(files=[str(sample_file)], output=str(out)))
        assert out.read_text(encoding="utf-8").splitlines() == SORTED_SAMPLE

    def test_reverse(self, sample_file: Path, tmp_dir: Path):
        out = tmp_dir / "out.txt"
        cmd_sort(SortArgs(files=[str(sample_file)], output=str(out), reverse=True))
        assert out.read_text(encoding="utf-8").splitlines() == SORTED_SAMPLE[::-1]

    def test_multiple_files_are_merged(self, tmp_dir: Path):
        first = tmp_dir / "a.txt"
        second = tmp_dir / "b.txt"
        first.write_text("10s\n1h\n", encoding="utf-8")
        second.write_text("9s\n1d\n", encoding="utf-8")
        out = tmp_dir / "out.txt"

        cmd_sort(SortArgs(files=[str(first), str(second)], output=str(out)))

        assert out.read_text(encoding="utf-8") == "9s\n10s\n1h\n1d\n"

    def test_skip_blank(self, tmp_dir: Path):
        path = tmp_dir / "in.txt"
        path.write_text("2s\n\n1s\n  \n", encoding="utf-8")
        out = tmp_dir / "out.txt"

        cmd_sort(SortArgs(files=[str(path)], output=str(out), skip_blank=True))

        assert out.read_text(encoding="utf-8") == "1s\n2s\n"

    def test_blank_lines_sort_first(self, tmp_dir: Path):
        path = tmp_dir / "in.txt"
        path.write_text("2s\n\n1s\n", encoding="utf-8")
        out = tmp_dir / "out.txt"

        cmd_sort(SortArgs(files=[str(path)], output=str(out)))

        assert out.read_text(encoding="utf-8") == "\n1s\n2s\n"

    def test_missing_input_writes_nothing(self, tmp_dir: Path):
        """Read errors abort before any output is written."""
        out = tmp_dir / "out.txt"
        with pytest.raises(UserError) as exc_info:
            cmd_sort(SortArgs(files=[str(tmp_dir / "missing.txt")], output=str(out)))
        assert exc_info.value.rc == 1
        assert not out.exists()

    def test_sorts_in_place_once(self, mocker, sample_file: Path, tmp_dir: Path):
        """All inputs are collected and sorted in a single call."""
        mock_sort = mocker.patch("durationsort.commands.sort.sort_in_place")
        cmd_sort(
            SortArgs(files=[str(sample_file)], output=str(tmp_dir / "out.txt"), reverse=True)
        )
        mock_sort.assert_called_once()
        assert mock_sort.call_args.kwargs == {"reverse": True}

    def test_debug_logging(self, caplog, sample_file: Path, tmp_dir: Path):
        caplog.set_level(logging.DEBUG, logger="durationsort")
        cmd_sort(SortArgs(files=[str(sample_file)], output=str(tmp_dir / "out.txt")))
        assert "Read 7 lines" in caplog.text
        assert "Sorted 7 lines" in caplog.text
