# topmark:header:start
#
#   project      : DtsGen
#   file         : renderer.py
#   file_relpath : src/dtsgen/pipeline/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Renderer step: turn one merged record into TypeScript declaration text.

Declarations inside a generated ``export namespace`` block are *ambient* and
use the ``export`` prefix; top-level declarations use ``export declare``.

The ``const_enum`` flag selects ``const enum`` for Enum records and, for
StringEnum records, chooses between a ``const enum`` block and a string
literal union type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtsgen.model.records import RecordKind
from dtsgen.pipeline.indent import correct_indent

if TYPE_CHECKING:
    from dtsgen.model.records import TypeDefRecord

AMBIENT_EXPORT: str = "export"
DECLARE_EXPORT: str = "export declare"


def export_prefix(ambient: bool) -> str:
    """Return the export keyword(s) for the emission mode."""
    return AMBIENT_EXPORT if ambient else DECLARE_EXPORT


def string_enum_union(definition: str) -> str:
    """Build a union type body from a string enum definition.

    The variants are the text after the first ``=``, split on ``,`` and
    trimmed; empty variants (a trailing comma) are skipped. Without any ``=``
    the whole definition is taken as the variant list.

    Example:
        ``'Color = "red", "green"'`` becomes ``'"red" | "green"'``.
    """
    _head, sep, tail = definition.partition("=")
    variants: str = tail if sep else definition
    return " | ".join(v.strip() for v in variants.split(",") if v.strip())


def _block(keyword: str, name: str, body: str) -> str:
    return f"{keyword} {name} {{\n{body}\n}}"


def render_declaration(record: TypeDefRecord, *, const_enum: bool, ambient: bool) -> str:
    """Render the declaration for ``record`` without doc comment or indentation."""
    prefix: str = export_prefix(ambient)
    match record.kind:
        case RecordKind.INTERFACE:
            return _block("export interface", record.name, record.definition)
        case RecordKind.ENUM:
            enum_kw: str = "const enum" if const_enum else "enum"
            return _block(f"{prefix} {enum_kw}", record.name, record.definition)
        case RecordKind.STRING_ENUM:
            if const_enum:
                return _block(f"{prefix} const enum", record.name, record.definition)
            return f"export type {record.name} = {string_enum_union(record.definition)};"
        case RecordKind.STRUCT:
            text: str = _block(f"{prefix} class", record.name, record.definition)
            alias: str | None = record.alias_name
            if alias is not None:
                text += f"\nexport type {alias} = {record.name}"
            return text
        case RecordKind.FN:
            return f"{prefix} {record.definition}"
        case RecordKind.CONST | RecordKind.IMPL:
            return record.definition


def render_record(
    record: TypeDefRecord,
    *,
    const_enum: bool,
    indent: int = 0,
    ambient: bool = False,
) -> str:
    """Render one record, doc comment included, re-indented at ``indent``.

    Args:
        record (TypeDefRecord): A merged record.
        const_enum (bool): Emit enums as ``const enum``.
        indent (int): Base indent width in spaces.
        ambient (bool): Use the ambient export prefix (inside a namespace block).

    Returns:
        str: Declaration text; every line ends with ``\\n``.
    """
    text: str = (record.doc_comment or "") + render_declaration(
        record, const_enum=const_enum, ambient=ambient
    )
    return correct_indent(text, indent)
