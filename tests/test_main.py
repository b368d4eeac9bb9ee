"""Tests for durationsort/__main__.py - module entry point."""

from __future__ import annotations

import runpy
import subprocess
import sys


class TestMainModule:
    """Tests for __main__ module entry point."""

    def test_main_is_cli_main(self):
        """The module entry point is the CLI's main()."""
        from durationsort.__main__ import main
        from durationsort.cli import main as cli_main

        assert main is cli_main

    def test_run_as_module_calls_main(self, mocker):
        """Running the package as __main__ invokes cli.main once."""
        mock_main = mocker.patch("durationsort.cli.main")
        runpy.run_module("durationsort", run_name="__main__")
        mock_main.assert_called_once_with()

    def test_python_m_sort(self):
        """python -m durationsort sort sorts stdin."""
        result = subprocess.run(
            [sys.executable, "-m", "durationsort", "sort"],
            input="job 10s\njob 9s\njob 1m\n",
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )
        assert result.returncode == 0
        assert result.stdout == "job 9s\njob 10s\njob 1m\n"

    def test_python_m_parse_failure(self):
        """Parse errors exit with status 1 and report on stderr."""
        result = subprocess.run(
            [sys.executable, "-m", "durationsort", "parse", "1dy"],
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )
        assert result.returncode == 1
        assert "ERROR:" in result.stderr
