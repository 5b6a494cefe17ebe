# topmark:header:start
#
#   project      : DtsGen
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from dtsgen.constants import DTSGEN_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == DTSGEN_VERSION


@mark_cli
def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": DTSGEN_VERSION}


@mark_cli
def test_group_without_subcommand_prints_hint() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "dtsgen generate" in result.output
