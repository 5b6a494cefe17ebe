# topmark:header:start
#
#   project      : DtsGen
#   file         : reader.py
#   file_relpath : src/dtsgen/pipeline/reader.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Reader step: decode the intermediate type-def record stream.

The record file is line oriented: every non-blank line holds one JSON object.
When the compiler interleaves its own log tags, a line looks like
``<tag>:{"kind": ...}``; any line that does not start with ``{`` has
everything up to and including the first ``:`` stripped before decoding.

Decoding is all-or-nothing. The first line that fails to decode raises
`MalformedStreamError` so no declaration file is produced from a corrupt
stream.

After decoding, records are sorted with the Struct-first pre-order (see
`record_sort_key`).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from dtsgen.config.logging import get_logger
from dtsgen.core.errors import MalformedStreamError, MissingInputError, ReadFailureError
from dtsgen.model.records import TypeDefRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from dtsgen.config.logging import DtsgenLogger

logger: DtsgenLogger = get_logger(__name__)

RECORD_OPEN_MARKER: str = "{"


def strip_stage_prefix(line: str) -> str:
    """Remove a ``<tag>:`` prefix from a trimmed record line.

    Lines starting with the object-open marker are returned unchanged, as are
    lines without any ``:``.

    Args:
        line (str): A trimmed input line.

    Returns:
        str: The JSON payload candidate.
    """
    if line.startswith(RECORD_OPEN_MARKER):
        return line
    _tag, sep, rest = line.partition(":")
    return rest if sep else line


def parse_record_line(
    line: str,
    *,
    path: Path | str | None = None,
    lineno: int | None = None,
) -> TypeDefRecord | None:
    """Decode one line of the record stream.

    Args:
        line (str): Raw line (with or without its line terminator).
        path (Path | str | None): Source file, for error reporting.
        lineno (int | None): 1-based line number, for error reporting.

    Returns:
        TypeDefRecord | None: The decoded record, or None for a blank line.

    Raises:
        MalformedStreamError: If the line is not a structurally valid record.
    """
    payload: str = strip_stage_prefix(line.strip())
    if not payload:
        return None
    try:
        data: object = json.loads(payload)
        return TypeDefRecord.from_dict(data)  # type: ignore[arg-type]
    except (ValueError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError subclass
        raise MalformedStreamError(str(exc), path=path, lineno=lineno, line=line) from exc


def record_sort_key(record: TypeDefRecord) -> tuple[bool, str]:
    """Struct-first, then lexical by name."""
    return (not record.is_struct, record.name)


def sort_records(records: Iterable[TypeDefRecord]) -> list[TypeDefRecord]:
    """Return records in render pre-order.

    The sort is stable, so records with equal keys (a Struct's Impl blocks,
    for instance) keep their stream order.

    Args:
        records (Iterable[TypeDefRecord]): Decoded records in arrival order.

    Returns:
        list[TypeDefRecord]: A new, sorted list.
    """
    return sorted(records, key=record_sort_key)


def decode_lines(
    lines: Iterable[str],
    *,
    path: Path | str | None = None,
) -> list[TypeDefRecord]:
    """Decode every non-blank line, in arrival order.

    Args:
        lines (Iterable[str]): Lines of the record stream.
        path (Path | str | None): Source file, for error reporting.

    Returns:
        list[TypeDefRecord]: Decoded records (unsorted).

    Raises:
        MalformedStreamError: On the first malformed line.
    """
    records: list[TypeDefRecord] = []
    for lineno, line in enumerate(lines, start=1):
        record: TypeDefRecord | None = parse_record_line(line, path=path, lineno=lineno)
        if record is None:
            continue
        logger.trace("line %d: %s %s", lineno, record.kind.value, record.name)
        records.append(record)
    return records


def _iter_text_lines(fh: BinaryIO, *, path: Path) -> Iterator[str]:
    """Yield the UTF-8 lines of `fh`, split on ``\\n`` only."""
    for lineno, raw in enumerate(fh, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedStreamError(
                str(exc), path=path, lineno=lineno, line=raw.decode("utf-8", "replace")
            ) from exc


def read_records(path: Path | str) -> list[TypeDefRecord]:
    """Read and sort the records of an intermediate type-def file.

    Args:
        path (Path | str): Path to the record file.

    Returns:
        list[TypeDefRecord]: Records in render pre-order.

    Raises:
        MissingInputError: If ``path`` is not an existing file.
        MalformedStreamError: If any line is not valid UTF-8 or fails to decode.
        ReadFailureError: If the file exists but cannot be read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise MissingInputError(file_path)

    try:
        with file_path.open("rb") as fh:
            records: list[TypeDefRecord] = decode_lines(
                _iter_text_lines(fh, path=file_path), path=file_path
            )
    except OSError as exc:
        raise ReadFailureError(file_path, exc.strerror or str(exc)) from exc

    logger.debug("Decoded %d type-def record(s) from %s", len(records), file_path)
    return sort_records(records)
