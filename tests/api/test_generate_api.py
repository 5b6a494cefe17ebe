# topmark:header:start
#
#   project      : DtsGen
#   file         : test_generate_api.py
#   file_relpath : tests/api/test_generate_api.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Tests for the public `dtsgen.api.generate` entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dtsgen.api import GenerationResult, GenerationStatus, build_header_prefix, generate
from dtsgen.constants import DEFAULT_TYPE_DEF_HEADER
from dtsgen.core.diagnostics import DiagnosticLevel
from dtsgen.core.errors import MalformedStreamError
from dtsgen.pipeline.writer import WriteStatus
from tests.conftest import make_config, rec, write_records

if TYPE_CHECKING:
    from pathlib import Path


def test_generate_writes_file_and_reports_exports(tmp_path: Path) -> None:
    write_records(
        tmp_path / "records.tmp",
        [rec("struct", "Widget"), rec("impl", "Widget", "render(): void")],
    )
    result: GenerationResult = generate(make_config(tmp_path, input="records.tmp"))

    assert result.status is GenerationStatus.GENERATED
    assert result.exports == ("Widget",)
    assert result.write is not None and result.write.status is WriteStatus.WRITTEN
    assert result.dest_path.read_text(encoding="utf-8") == result.text
    assert result.text.startswith(DEFAULT_TYPE_DEF_HEADER)


def test_missing_input_is_not_an_error(tmp_path: Path) -> None:
    result: GenerationResult = generate(make_config(tmp_path, input="absent.tmp"))
    assert result.status is GenerationStatus.SKIPPED_NO_INPUT
    assert result.text == ""
    assert result.write is None
    assert not result.dest_path.exists()


def test_unconfigured_input_is_skipped(tmp_path: Path) -> None:
    result: GenerationResult = generate(make_config(tmp_path))
    assert result.status is GenerationStatus.SKIPPED_NO_INPUT
    assert result.input_path is None


def test_dry_run_previews(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("const", "A", "export const A: 1")])
    result: GenerationResult = generate(make_config(tmp_path, input="records.tmp", dry_run=True))
    assert result.status is GenerationStatus.PREVIEWED
    assert result.text.endswith("export const A: 1\n\n")
    assert not result.dest_path.exists()


def test_malformed_stream_propagates_and_writes_nothing(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", ["{bad"])
    with pytest.raises(MalformedStreamError):
        generate(make_config(tmp_path, input="records.tmp"))
    assert not (tmp_path / "dist").exists()


def test_header_prefix_and_diagnostics_are_combined(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("fn", "f", "function f(b: Buffer): void")])
    config = make_config(tmp_path, input="records.tmp", header="/* x */\n", write_strategy="nope")
    assert build_header_prefix(config) == DEFAULT_TYPE_DEF_HEADER + "/* x */\n"

    result: GenerationResult = generate(config)
    assert [d.level for d in result.diagnostics] == [DiagnosticLevel.WARNING, DiagnosticLevel.INFO]
    assert result.to_dict()["diagnostics"][1]["level"] == "info"
