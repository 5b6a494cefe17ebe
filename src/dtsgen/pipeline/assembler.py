# topmark:header:start
#
#   project      : DtsGen
#   file         : assembler.py
#   file_relpath : src/dtsgen/pipeline/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Declaration assembler: records file in, declaration text and exports out.

Steps, in order:

1. `reader` decodes and sorts the record stream;
2. `merger` groups records by namespace and folds Impl blocks into classes;
3. each group is rendered: the top-level group flat, every other group inside
   an ``export namespace NAME { ... }`` block;
4. `substitutions` rewrites unsupported types and builds the header.

Exports are the top-level Const/Enum/Fn/Struct/StringEnum names (plus a
distinct ``original_name``) and the name of every namespace block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.constants import TOP_LEVEL_NAMESPACE
from dtsgen.model.records import RecordKind
from dtsgen.pipeline.merger import group_records, ordered_namespaces
from dtsgen.pipeline.reader import read_records, sort_records
from dtsgen.pipeline.renderer import render_record
from dtsgen.pipeline.substitutions import SubstitutionResult, apply_substitutions

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.core.diagnostics import Diagnostic
    from dtsgen.model.records import TypeDefRecord

logger: DtsgenLogger = get_logger(__name__)

NAMESPACE_INDENT: int = 2

EXPORTED_KINDS: frozenset[RecordKind] = frozenset(
    {
        RecordKind.CONST,
        RecordKind.ENUM,
        RecordKind.FN,
        RecordKind.STRUCT,
        RecordKind.STRING_ENUM,
    }
)


@dataclass(frozen=True)
class AssemblyResult:
    """Assembled declaration file.

    Unpacks as ``(text, exports)``.

    Attributes:
        text (str): Header followed by the declaration body.
        exports (tuple[str, ...]): Top-level symbol and namespace names, in emission order.
        diagnostics (tuple[Diagnostic, ...]): Advisory notes from the substitution pass.
    """

    text: str
    exports: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    def __iter__(self) -> Iterator[object]:
        return iter((self.text, list(self.exports)))


def _top_level_exports(record: TypeDefRecord) -> list[str]:
    if record.kind not in EXPORTED_KINDS:
        return []
    names: list[str] = [record.name]
    if record.alias_name is not None:
        names.append(record.alias_name)
    return names


def render_body(records: Iterable[TypeDefRecord], const_enum: bool) -> tuple[str, list[str]]:
    """Render sorted records into the declaration body.

    Args:
        records (Iterable[TypeDefRecord]): Records in render pre-order.
        const_enum (bool): Emit enums as ``const enum``.

    Returns:
        tuple[str, list[str]]: The body text and the export names.
    """
    exports: list[str] = []
    parts: list[str] = []

    for namespace, defs in ordered_namespaces(group_records(records)):
        if namespace == TOP_LEVEL_NAMESPACE:
            for record in defs:
                parts.append(render_record(record, const_enum=const_enum, indent=0, ambient=False))
                parts.append("\n")
                exports.extend(_top_level_exports(record))
        else:
            exports.append(namespace)
            parts.append(f"export namespace {namespace} {{\n")
            for record in defs:
                parts.append(
                    render_record(
                        record,
                        const_enum=const_enum,
                        indent=NAMESPACE_INDENT,
                        ambient=True,
                    )
                )
                parts.append("\n")
            parts.append("}\n")
        logger.trace("Rendered namespace %s (%d record(s))", namespace, len(defs))

    return "".join(parts), exports


def assemble_records(
    records: Iterable[TypeDefRecord],
    const_enum: bool,
    header_prefix: str = "",
) -> AssemblyResult:
    """Assemble declarations from in-memory records.

    Args:
        records (Iterable[TypeDefRecord]): Records in any order.
        const_enum (bool): Emit enums as ``const enum``.
        header_prefix (str): Text placed ahead of all generated content.

    Returns:
        AssemblyResult: Final text, exports and diagnostics.
    """
    body, exports = render_body(sort_records(records), const_enum)
    result: SubstitutionResult = apply_substitutions(body, header_prefix)
    return AssemblyResult(
        text=result.text,
        exports=tuple(exports),
        diagnostics=result.diagnostics,
    )


def assemble(
    records_path: Path | str,
    const_enum: bool,
    header_prefix: str = "",
) -> AssemblyResult:
    """Assemble the declaration file for an intermediate record file.

    Args:
        records_path (Path | str): Path to the intermediate type-def file.
        const_enum (bool): Emit enums as ``const enum``.
        header_prefix (str): Text placed ahead of all generated content.

    Returns:
        AssemblyResult: Final text, exports and diagnostics.

    Raises:
        MissingInputError: If the record file does not exist.
        MalformedStreamError: If a record line fails to decode.
        ReadFailureError: If the record file exists but cannot be read.
    """
    records: list[TypeDefRecord] = read_records(records_path)
    result: AssemblyResult = assemble_records(records, const_enum, header_prefix)
    logger.debug(
        "Assembled %d byte(s) of declarations, %d export(s)",
        len(result.text),
        len(result.exports),
    )
    return result
