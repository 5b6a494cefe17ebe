# topmark:header:start
#
#   project      : DtsGen
#   file         : writer.py
#   file_relpath : src/dtsgen/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Writer step for committing the assembled declarations to a sink.

This step is the only place where DtsGen writes results to a destination, so
the CLI and the public API cannot drift apart.

Sinks
-----
- FileSystemSink: writes ``config.dest_path``, creating the output directory.
  The ``atomic`` strategy writes a temporary file next to the destination and
  renames it over the destination; ``inplace`` truncates and writes directly.
- StdoutSink: writes the declarations to stdout.
- NullSink: no-op (dry-run).
"""

from __future__ import annotations

import os
import sys
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from dtsgen.config.logging import get_logger
from dtsgen.config.types import FileWriteStrategy, OutputTarget
from dtsgen.core.errors import WriteFailureError

if TYPE_CHECKING:
    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.model import Config

logger: DtsgenLogger = get_logger(__name__)


class WriteStatus(Enum):
    """Outcome of the writer step."""

    WRITTEN = "written"
    PREVIEWED = "previewed"


@dataclass(frozen=True)
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    path: Path | None = None
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, text: str) -> WriteResult:
        """Write ``text`` to the target sink.

        Args:
            text (str): The complete declaration file contents.

        Returns:
            WriteResult: Status and number of bytes written.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    def write(self, text: str) -> WriteResult:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: would write %d character(s) to %s", len(text), self.path)
        return WriteResult(status=WriteStatus.PREVIEWED, path=self.path)


class StdoutSink:
    """Standard-output sink."""

    def write(self, text: str) -> WriteResult:
        """Emit the declarations to standard output."""
        sys.stdout.write(text)
        sys.stdout.flush()
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(text.encode("utf-8")))


class FileSystemSink:
    """Filesystem sink writing to a fixed destination path."""

    def __init__(
        self,
        path: Path,
        strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC,
    ) -> None:
        self.path = path
        self.strategy = strategy

    def _write_atomic(self, data: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def write(self, text: str) -> WriteResult:
        """Write ``text`` to ``self.path`` (UTF-8, LF newlines).

        Raises:
            WriteFailureError: If the directory or file cannot be written.
        """
        data: bytes = text.encode("utf-8")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.strategy is FileWriteStrategy.ATOMIC:
                self._write_atomic(data)
            else:
                self.path.write_bytes(data)
        except OSError as exc:
            raise WriteFailureError(self.path, exc.strerror or str(exc)) from exc
        logger.debug("FileSystemSink: wrote %d bytes to file %s", len(data), self.path)
        return WriteResult(status=WriteStatus.WRITTEN, path=self.path, bytes_written=len(data))


def select_sink(config: Config) -> WriteSink:
    """Return the appropriate sink for ``config``.

    Args:
        config (Config): Runtime configuration.

    Returns:
        WriteSink: ``NullSink`` for a dry run, ``StdoutSink`` when targeting
        stdout, otherwise ``FileSystemSink``.
    """
    if not config.apply_changes:
        logger.debug("Selected NULL sink (config.apply_changes is False)")
        return NullSink(config.dest_path)
    if config.output_target is OutputTarget.STDOUT:
        logger.debug("Selected STDOUT sink")
        return StdoutSink()
    logger.debug("Selected file system sink (%s)", config.write_strategy.name.lower())
    return FileSystemSink(config.dest_path, config.write_strategy)


def write_declarations(text: str, config: Config) -> WriteResult:
    """Writer step: commit the declarations to the sink selected by ``config``.

    Args:
        text (str): Complete declaration file contents.
        config (Config): Runtime configuration.

    Returns:
        WriteResult: Outcome of the write.

    Raises:
        WriteFailureError: If the destination cannot be written.
    """
    return select_sink(config).write(text)
