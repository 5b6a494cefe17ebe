# topmark:header:start
#
#   project      : DtsGen
#   file         : errors.py
#   file_relpath : src/dtsgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Exceptions for the DtsGen CLI.

Usage:
    Commands translate `dtsgen.core.errors` exceptions into these
    `click.ClickException` subclasses, which carry the process exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dtsgen.cli.exit_codes import ExitCode


class DtsgenCliError(click.ClickException):
    """Base class for all DtsGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class DtsgenUsageError(DtsgenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DtsgenDataError(DtsgenCliError):
    """Error for a malformed intermediate record stream."""

    exit_code = ExitCode.DATA_ERROR


class DtsgenFileNotFoundError(DtsgenCliError):
    """Error when an explicitly named file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DtsgenIOError(DtsgenCliError):
    """Error for failures writing the declaration file."""

    exit_code = ExitCode.IO_ERROR


class DtsgenConfigError(DtsgenCliError):
    """Error for configuration errors."""

    exit_code = ExitCode.CONFIG_ERROR

