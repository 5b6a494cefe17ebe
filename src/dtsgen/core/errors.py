# topmark:header:start
#
#   project      : DtsGen
#   file         : errors.py
#   file_relpath : src/dtsgen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Exceptions raised by the DtsGen core.

These are framework-agnostic; the CLI maps them to Click exceptions with
exit codes in `dtsgen.cli.errors`.

Taxonomy:
    - `MissingInputError`: the intermediate record file does not exist. Not fatal:
      `dtsgen.api.generate` treats it as "nothing to generate".
    - `MalformedStreamError`: a record line failed to decode. Fatal; nothing is written.
    - `ReadFailureError`: the record file exists but could not be read. Fatal.
    - `WriteFailureError`: the destination could not be written. Fatal.

An Impl record without a matching Struct is not an error: the merger drops it
and logs at DEBUG level.
"""

from __future__ import annotations

from pathlib import Path


class DtsgenError(Exception):
    """Base class for all DtsGen core errors."""


class MissingInputError(DtsgenError):
    """The intermediate record file is absent."""

    def __init__(self, path: Path | str | None) -> None:
        self.path: Path | None = Path(path) if path is not None else None
        super().__init__(f"Intermediate type-def file not found: {path}")


class MalformedStreamError(DtsgenError):
    """A line of the intermediate record file could not be decoded."""

    def __init__(
        self,
        reason: str,
        *,
        path: Path | str | None = None,
        lineno: int | None = None,
        line: str | None = None,
    ) -> None:
        self.reason: str = reason
        self.path: Path | None = Path(path) if path is not None else None
        self.lineno: int | None = lineno
        self.line: str | None = line
        where: str = str(path) if path is not None else "<records>"
        if lineno is not None:
            where = f"{where}:{lineno}"
        super().__init__(f"Malformed type-def record at {where}: {reason}")


class ReadFailureError(DtsgenError):
    """The intermediate record file exists but could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"Cannot read {path}: {reason}")


class WriteFailureError(DtsgenError):
    """The declaration file could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"Cannot write {path}: {reason}")
