# topmark:header:start
#
#   project      : DtsGen
#   file         : generate.py
#   file_relpath : src/dtsgen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""DtsGen `generate` command.

Reads the intermediate type-def record file, assembles the declaration file
and writes it to ``{dist}/{filename}`` (or stdout). A missing record file is
not an error: the command prints a note and exits successfully.

Input:
    ``--input`` or ``$TYPE_DEF_TMP_PATH``; alternatively ``--package`` plus
    ``--manifest`` derive the path the compile step uses.

Output:
    Notes and diagnostics go to stderr; with ``--stdout`` the declarations are
    the only thing written to stdout. ``--format json`` prints a summary object
    to stdout instead of human-readable notes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from dtsgen.api import GenerationStatus, generate
from dtsgen.cli.errors import (
    DtsgenConfigError,
    DtsgenDataError,
    DtsgenFileNotFoundError,
    DtsgenIOError,
    DtsgenUsageError,
)
from dtsgen.cli.options import OutputFormat, get_effective_verbosity, output_format_option
from dtsgen.config.loaders import load_config_table
from dtsgen.config.logging import get_logger
from dtsgen.config.model import MutableConfig
from dtsgen.config.types import FileWriteStrategy, OutputTarget
from dtsgen.constants import TYPE_DEF_TMP_PATH_ENV
from dtsgen.core.diagnostics import compute_diagnostic_stats
from dtsgen.core.errors import MalformedStreamError, ReadFailureError, WriteFailureError

if TYPE_CHECKING:
    from dtsgen.api import GenerationResult
    from dtsgen.cli.console import ConsoleLike
    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.model import Config
    from dtsgen.core.diagnostics import Diagnostic, DiagnosticStats

logger: DtsgenLogger = get_logger(__name__)


def _check_config_files(config_files: tuple[Path, ...]) -> None:
    """Fail early on explicit config files that are missing or unusable."""
    for path in config_files:
        if not path.is_file():
            raise DtsgenFileNotFoundError(f"Config file not found: {path}")
        if load_config_table(path) is None:
            raise DtsgenConfigError(f"No usable DtsGen settings in config file: {path}")


def _emit_diagnostics(
    console: ConsoleLike,
    diagnostics: tuple[Diagnostic, ...],
    *,
    color: bool,
) -> None:
    for diag in diagnostics:
        text: str = f"[{diag.level.value}] {diag.message}"
        console.note(diag.level.color(text) if color else text)


def _emit_default(
    console: ConsoleLike,
    result: GenerationResult,
    config: Config,
    *,
    verbosity: int,
    print_exports: bool,
    color: bool,
) -> None:
    if verbosity < 0:
        return
    if verbosity > 0:
        for path in config.config_files:
            console.note(f"Config: {path}")
        console.note(f"Input: {result.input_path}")

    if result.status is GenerationStatus.SKIPPED_NO_INPUT:
        where: str = str(result.input_path) if result.input_path else "(not configured)"
        console.note(f"No intermediate type-def file found at {where}; nothing to generate.")
    elif result.status is GenerationStatus.PREVIEWED:
        console.note(f"Dry run: would write {result.dest_path}")
    elif config.output_target is OutputTarget.FILE:
        console.note(console.styled(f"Wrote {result.dest_path}", fg="green"))

    _emit_diagnostics(console, result.diagnostics, color=color)
    if verbosity > 0 and result.diagnostics:
        stats: DiagnosticStats = compute_diagnostic_stats(result.diagnostics)
        console.note(
            f"Diagnostics: {stats.n_info} info, {stats.n_warning} warning(s), "
            f"{stats.n_error} error(s)"
        )

    if print_exports:
        for name in result.exports:
            console.note(name)


@click.command(
    name="generate",
    help="Generate the TypeScript declaration file from the type-def records.",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Extra TOML config file(s), merged in order over the discovered project config.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Do not discover dtsgen.toml / [tool.dtsgen] in the working directory.",
)
@click.option(
    "--input",
    "input_path",
    envvar=TYPE_DEF_TMP_PATH_ENV,
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Intermediate type-def record file (default: ${TYPE_DEF_TMP_PATH_ENV}).",
)
@click.option("--package", "package_name", default=None, help="Package name of the binding.")
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Manifest path of the binding (with --package, derives the record file path).",
)
@click.option(
    "--dist",
    "dist_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: dist).",
)
@click.option("--filename", default=None, help="Output file name (default: index.d.ts).")
@click.option("--header", default=None, help="Extra header text after the default banner.")
@click.option(
    "--header-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read the extra header text from a file.",
)
@click.option(
    "--const-enum/--no-const-enum",
    "const_enum",
    default=None,
    help="Emit enums as 'const enum' (default) or plain 'enum'.",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Write the declarations to stdout instead of a file.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Assemble the declarations but do not write them.",
)
@click.option(
    "--write-strategy",
    type=click.Choice([s.name.lower() for s in FileWriteStrategy], case_sensitive=False),
    default=None,
    help="How to write the file: atomic (default) or inplace.",
)
@click.option(
    "--print-exports",
    is_flag=True,
    default=False,
    help="List the exported top-level names.",
)
@output_format_option
def generate_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    input_path: Path | None,
    package_name: str | None,
    manifest_path: Path | None,
    dist_dir: Path | None,
    filename: str | None,
    header: str | None,
    header_file: Path | None,
    const_enum: bool | None,
    to_stdout: bool,
    dry_run: bool,
    write_strategy: str | None,
    print_exports: bool,
    output_format: OutputFormat | None,
) -> None:
    """Generate the declaration file.

    Raises:
        DtsgenUsageError: On conflicting options.
        DtsgenDataError: If the record file holds a malformed line.
        DtsgenIOError: If the record file cannot be read or the declaration
            file cannot be written.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if to_stdout and dry_run:
        raise DtsgenUsageError("The '--stdout' and '--dry-run' options are mutually exclusive.")
    if header is not None and header_file is not None:
        raise DtsgenUsageError("The '--header' and '--header-file' options are mutually exclusive.")
    if to_stdout and fmt is OutputFormat.JSON:
        raise DtsgenUsageError("'--format json' cannot be combined with '--stdout'.")
    if (package_name is None) != (manifest_path is None):
        raise DtsgenUsageError("'--package' and '--manifest' must be given together.")

    _check_config_files(config_files)

    config: Config = MutableConfig.load_merged(
        config_files=config_files,
        no_config=no_config,
        args={
            "input": input_path,
            "package": package_name,
            "manifest": manifest_path,
            "dist": dist_dir,
            "filename": filename,
            "header": header,
            "header_file": header_file,
            "const_enum": const_enum,
            "write_strategy": write_strategy,
            "stdout": to_stdout,
            "dry_run": dry_run,
        },
    ).freeze()
    logger.debug("Effective config: %s", config)

    try:
        result: GenerationResult = generate(config)
    except MalformedStreamError as exc:
        raise DtsgenDataError(str(exc)) from exc
    except (ReadFailureError, WriteFailureError) as exc:
        raise DtsgenIOError(str(exc)) from exc

    if fmt is OutputFormat.JSON:
        console.print(json.dumps(result.to_dict(), indent=2))
        return

    _emit_default(
        console,
        result,
        config,
        verbosity=verbosity,
        print_exports=print_exports,
        color=bool(ctx.obj.get("color_enabled", False)),
    )
