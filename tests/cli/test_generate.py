# topmark:header:start
#
#   project      : DtsGen
#   file         : test_generate.py
#   file_relpath : tests/cli/test_generate.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""CLI tests: `generate` command outcomes, output routing and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from dtsgen.cli.exit_codes import ExitCode
from dtsgen.core.errors import ReadFailureError
from dtsgen.constants import DEFAULT_TYPE_DEF_HEADER, TYPE_DEF_TMP_PATH_ENV
from dtsgen.pipeline.substitutions import BUFFER_NOTE
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, rec, write_records

if TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from click.testing import Result

WIDGET_DTS: str = DEFAULT_TYPE_DEF_HEADER + "export declare class Widget {\n  render(): void\n}\n\n"


def _widget_records(tmp_path: Path) -> Path:
    return write_records(
        tmp_path / "records.tmp",
        [rec("struct", "Widget"), rec("impl", "Widget", "render(): void")],
    )


@mark_cli
def test_generate_writes_default_destination(tmp_path: Path) -> None:
    _widget_records(tmp_path)
    result: Result = run_cli_in(tmp_path, ["--no-color", "generate", "--input", "records.tmp"])
    assert_SUCCESS(result)
    assert (tmp_path / "dist" / "index.d.ts").read_text(encoding="utf-8") == WIDGET_DTS
    assert "Wrote" in result.stderr


@mark_cli
def test_generate_reads_input_from_environment(tmp_path: Path) -> None:
    path: Path = _widget_records(tmp_path)
    result: Result = run_cli_in(
        tmp_path,
        ["generate", "--dist", "out"],
        env={TYPE_DEF_TMP_PATH_ENV: str(path)},
    )
    assert_SUCCESS(result)
    assert (tmp_path / "out" / "index.d.ts").read_text(encoding="utf-8") == WIDGET_DTS


@mark_cli
def test_missing_input_is_skipped_successfully(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "absent.tmp"])
    assert_SUCCESS(result)
    assert "nothing to generate" in result.stderr
    assert not (tmp_path / "dist").exists()


@mark_cli
def test_no_input_configured_is_skipped_successfully(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["generate"])
    assert_SUCCESS(result)
    assert "not configured" in result.stderr


@mark_cli
def test_quiet_suppresses_notes(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-q", "generate", "--input", "absent.tmp"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_stdout_mode_keeps_stdout_clean(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("fn", "f", "function f(b: Buffer): void")])
    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "generate", "--input", "records.tmp", "--stdout"],
    )
    assert_SUCCESS(result)
    assert result.stdout == (
        DEFAULT_TYPE_DEF_HEADER + "\n\nexport declare function f(b: ArrayBuffer): void\n\n"
    )
    assert BUFFER_NOTE in result.stderr
    assert not (tmp_path / "dist").exists()


@mark_cli
def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    _widget_records(tmp_path)
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "records.tmp", "--dry-run"])
    assert_SUCCESS(result)
    assert "Dry run" in result.stderr
    assert not (tmp_path / "dist").exists()


@mark_cli
def test_no_const_enum_and_header(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("string_enum", "Color", 'Color = "red", "blue"')])
    result: Result = run_cli_in(
        tmp_path,
        [
            "generate",
            "--input",
            "records.tmp",
            "--no-const-enum",
            "--header",
            "/* extra */\n",
            "--filename",
            "color.d.ts",
        ],
    )
    assert_SUCCESS(result)
    assert (tmp_path / "dist" / "color.d.ts").read_text(encoding="utf-8") == (
        DEFAULT_TYPE_DEF_HEADER + '/* extra */\nexport type Color = "red" | "blue";\n\n'
    )


@mark_cli
def test_config_file_settings_apply(tmp_path: Path) -> None:
    _widget_records(tmp_path)
    (tmp_path / "dtsgen.toml").write_text(
        'input = "records.tmp"\ndist = "types"\n', encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["generate"])
    assert_SUCCESS(result)
    assert (tmp_path / "types" / "index.d.ts").read_text(encoding="utf-8") == WIDGET_DTS


@mark_cli
def test_json_format_reports_exports(tmp_path: Path) -> None:
    _widget_records(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["generate", "--input", "records.tmp", "--format", "json"]
    )
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["status"] == "generated"
    assert payload["exports"] == ["Widget"]
    assert payload["bytes_written"] == len(WIDGET_DTS.encode("utf-8"))


@mark_cli
def test_print_exports(tmp_path: Path) -> None:
    write_records(
        tmp_path / "records.tmp",
        [
            rec("struct", "Widget", original_name="RawWidget"),
            rec("fn", "draw", "function draw(): void", js_mod="ui"),
        ],
    )
    result: Result = run_cli_in(
        tmp_path, ["generate", "--input", "records.tmp", "--print-exports"]
    )
    assert_SUCCESS(result)
    lines: list[str] = result.stderr.splitlines()
    assert lines[-3:] == ["Widget", "RawWidget", "ui"]


@mark_cli
def test_malformed_stream_exits_with_data_error(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("struct", "Widget"), "{broken"])
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "records.tmp"])
    assert_exit(result, ExitCode.DATA_ERROR)
    assert "records.tmp:2" in result.stderr
    assert not (tmp_path / "dist").exists()


@mark_cli
def test_invalid_utf8_stream_exits_with_data_error(tmp_path: Path) -> None:
    payload: bytes = b'{"kind": "fn", "name": "f", "def": "f(): void \xff"}\n'
    (tmp_path / "records.tmp").write_bytes(payload)
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "records.tmp"])
    assert_exit(result, ExitCode.DATA_ERROR)
    assert "records.tmp:1" in result.stderr
    assert not (tmp_path / "dist").exists()


@mark_cli
def test_unreadable_stream_exits_with_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _widget_records(tmp_path)

    def _deny(path: Path) -> list[Any]:
        raise ReadFailureError(path, "Permission denied")

    monkeypatch.setattr("dtsgen.pipeline.assembler.read_records", _deny)
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "records.tmp"])
    assert_exit(result, ExitCode.IO_ERROR)
    assert "Permission denied" in result.stderr


@mark_cli
def test_write_failure_exits_with_io_error(tmp_path: Path) -> None:
    _widget_records(tmp_path)
    (tmp_path / "dist").write_text("not a directory", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["generate", "--input", "records.tmp"])
    assert_exit(result, ExitCode.IO_ERROR)


@mark_cli
def test_missing_config_file_exits_with_file_not_found(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["generate", "--config", "absent.toml"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
def test_invalid_config_file_exits_with_config_error(tmp_path: Path) -> None:
    (tmp_path / "bad.toml").write_text("= nope =\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["generate", "--config", "bad.toml"])
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_conflicting_options_exit_with_usage_error(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["generate", "--stdout", "--dry-run"])
    assert_exit(result, ExitCode.USAGE_ERROR)

    result = run_cli_in(tmp_path, ["generate", "--package", "only-package"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-v", "-q", "generate"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_verbose_reports_input_and_diagnostic_counts(tmp_path: Path) -> None:
    write_records(tmp_path / "records.tmp", [rec("fn", "f", "function f(b: Buffer): void")])
    result: Result = run_cli_in(
        tmp_path, ["-v", "--no-color", "generate", "--input", "records.tmp"]
    )
    assert_SUCCESS(result)
    assert "Input: " in result.stderr
    assert "Diagnostics: 1 info, 0 warning(s), 0 error(s)" in result.stderr
