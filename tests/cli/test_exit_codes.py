# topmark:header:start
#
#   project      : DtsGen
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Every exit code is reachable through a CLI error class."""

from __future__ import annotations

from dtsgen.cli import errors
from dtsgen.cli.errors import DtsgenCliError
from dtsgen.cli.exit_codes import ExitCode
from tests.conftest import mark_cli


def _error_classes() -> list[type[DtsgenCliError]]:
    return [
        obj
        for obj in vars(errors).values()
        if isinstance(obj, type) and issubclass(obj, DtsgenCliError)
    ]


@mark_cli
def test_error_classes_cover_every_failure_code() -> None:
    used: set[ExitCode] = {cls.exit_code for cls in _error_classes()}
    assert used == set(ExitCode) - {ExitCode.SUCCESS}


@mark_cli
def test_exit_codes_are_sysexits_aligned() -> None:
    assert {code.name: int(code) for code in ExitCode} == {
        "SUCCESS": 0,
        "FAILURE": 1,
        "USAGE_ERROR": 64,
        "DATA_ERROR": 65,
        "FILE_NOT_FOUND": 66,
        "IO_ERROR": 74,
        "CONFIG_ERROR": 78,
    }
