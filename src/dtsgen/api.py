# topmark:header:start
#
#   project      : DtsGen
#   file         : api.py
#   file_relpath : src/dtsgen/api.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Public API for generating declaration files.

Example:
    ```python
    from dtsgen.api import GenerationStatus, generate
    from dtsgen.config import MutableConfig

    cfg = MutableConfig.load_merged(args={"input": "records.tmp", "dist": "dist"}).freeze()
    result = generate(cfg)
    if result.status is GenerationStatus.GENERATED:
        print(result.exports)
    ```

A missing intermediate record file is not an error: the compile step writes
none when the module exports nothing, so `generate` reports
`GenerationStatus.SKIPPED_NO_INPUT` and writes nothing. Malformed records and
write failures propagate as `MalformedStreamError` and `WriteFailureError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.constants import DEFAULT_TYPE_DEF_HEADER
from dtsgen.core.errors import MissingInputError
from dtsgen.pipeline.assembler import AssemblyResult, assemble
from dtsgen.pipeline.writer import WriteResult, WriteStatus, write_declarations

if TYPE_CHECKING:
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.model import Config
    from dtsgen.core.diagnostics import Diagnostic

logger: DtsgenLogger = get_logger(__name__)


class GenerationStatus(Enum):
    """Outcome of `generate`."""

    GENERATED = "generated"
    PREVIEWED = "previewed"
    SKIPPED_NO_INPUT = "skipped_no_input"


@dataclass(frozen=True)
class GenerationResult:
    """Result of one declaration file generation.

    Attributes:
        status (GenerationStatus): What happened.
        input_path (Path | None): The intermediate record file consulted.
        dest_path (Path): Destination of the declaration file.
        text (str): Declaration file contents (empty when skipped).
        exports (tuple[str, ...]): Names to re-export, for manifest generation.
        diagnostics (tuple[Diagnostic, ...]): Config and substitution notes.
        write (WriteResult | None): Writer outcome (None when skipped).
    """

    status: GenerationStatus
    input_path: Path | None
    dest_path: Path
    text: str = ""
    exports: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default=())
    write: WriteResult | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly summary (without the declaration text)."""
        return {
            "status": self.status.value,
            "input": str(self.input_path) if self.input_path is not None else None,
            "dest": str(self.dest_path),
            "exports": list(self.exports),
            "bytes_written": self.write.bytes_written if self.write is not None else 0,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def build_header_prefix(config: Config) -> str:
    """Default banner followed by the configured extra header."""
    return DEFAULT_TYPE_DEF_HEADER + config.header


def generate(config: Config) -> GenerationResult:
    """Assemble and write the declaration file described by ``config``.

    Args:
        config (Config): Frozen runtime configuration.

    Returns:
        GenerationResult: Outcome, text, exports and diagnostics.

    Raises:
        MalformedStreamError: If the record file holds a malformed line.
        ReadFailureError: If the record file cannot be read.
        WriteFailureError: If the destination cannot be written.
    """
    input_path: Path | None = config.resolve_input_path()
    if input_path is None:
        logger.info("No intermediate type-def file configured; nothing to generate")
        return GenerationResult(
            status=GenerationStatus.SKIPPED_NO_INPUT,
            input_path=None,
            dest_path=config.dest_path,
            diagnostics=config.diagnostics,
        )

    try:
        assembled: AssemblyResult = assemble(
            input_path,
            config.const_enum,
            build_header_prefix(config),
        )
    except MissingInputError:
        logger.info("Intermediate type-def file %s not found; nothing to generate", input_path)
        return GenerationResult(
            status=GenerationStatus.SKIPPED_NO_INPUT,
            input_path=input_path,
            dest_path=config.dest_path,
            diagnostics=config.diagnostics,
        )

    write: WriteResult = write_declarations(assembled.text, config)
    status: GenerationStatus = (
        GenerationStatus.PREVIEWED
        if write.status is WriteStatus.PREVIEWED
        else GenerationStatus.GENERATED
    )
    logger.info("Declarations %s: %s", status.value, config.dest_path)
    return GenerationResult(
        status=status,
        input_path=input_path,
        dest_path=config.dest_path,
        text=assembled.text,
        exports=assembled.exports,
        diagnostics=config.diagnostics + assembled.diagnostics,
        write=write,
    )
