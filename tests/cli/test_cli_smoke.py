# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI smoke tests.

We use subprocess to run the actual entrypoint the way a user would, with
real stdin/stdout/stderr pipes. This catches issues that in-process tests
miss, like broken imports or the module not being runnable with -m.
"""

import subprocess
import sys

import pytest


def _run_cli(*args: str, stdin: str = "") -> subprocess.CompletedProcess[str]:
    """Run `classwork` with the given arguments and input, capturing output."""
    return subprocess.run(
        [sys.executable, "-m", "classwork.cli.main", *args],
        input=stdin,
        capture_output=True,
        text=True,
        timeout=10,
    )


class TestHelpTexts:
    @pytest.mark.parametrize("subcommand", ["grades", "matrix"])
    def test_subcommand_help_exits_zero(self, subcommand: str) -> None:
        result = _run_cli(subcommand, "--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_root_help_exits_with_user_error(self) -> None:
        result = _run_cli()
        assert result.returncode == 1


class TestPrograms:
    def test_grades_end_to_end(self) -> None:
        result = _run_cli("grades", stdin="90 15 15 42\n")
        assert result.returncode == 0
        assert result.stderr == ""
        assert "The maximum grade is 90\n" in result.stdout
        assert "The average grade is 40.500000\n" in result.stdout
        assert " 2 >    #######" in result.stdout

    def test_grades_bad_input(self) -> None:
        result = _run_cli("grades", stdin="ninety\n")
        assert result.returncode == 0
        assert result.stderr == "Invalid input. Please enter numbers only.\n"

    def test_matrix_end_to_end(self) -> None:
        result = _run_cli("matrix", stdin="1,3\n1 2 3\n3,1\n4\n5\n6\n")
        assert result.returncode == 0
        assert result.stderr == ""
        assert result.stdout.endswith("\nMatrix C:\n| 32 |\n")

    def test_matrix_bad_input_strict(self) -> None:
        result = _run_cli("matrix", "--strict-exit", stdin="2,2\n1 2 3\n")
        assert result.returncode == 4  # VALIDATION_ERROR
        assert result.stderr == "Error: Expected 2 values for row 1, got 3\n"
