# topmark:header:start
#
#   project      : DtsGen
#   file         : merger.py
#   file_relpath : src/dtsgen/pipeline/merger.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Merger step: group records by namespace and fold Impl blocks into classes.

Input is the sorted record list produced by the reader. Struct records are
held in an arena indexed by name while the stream is consumed; each Impl
record extends the definition of the Struct with the same name (newline
separated, in stream order). Impl records without a Struct are dropped.

Once the stream is consumed, every Struct is placed at the front of its
namespace group, so Structs always render before the other kinds of that
group regardless of arrival order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.constants import TOP_LEVEL_NAMESPACE
from dtsgen.model.records import RecordKind, TypeDefRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from dtsgen.config.logging import DtsgenLogger

logger: DtsgenLogger = get_logger(__name__)

NamespaceGroups = dict[str, list[TypeDefRecord]]


@dataclass
class _StructSlot:
    namespace: str
    record: TypeDefRecord


def _append_member_block(struct: TypeDefRecord, block: str) -> TypeDefRecord:
    merged: str = f"{struct.definition}\n{block}" if struct.definition else block
    return replace(struct, definition=merged)


def group_records(records: Iterable[TypeDefRecord]) -> NamespaceGroups:
    """Group records by namespace key and merge Impl records into their Struct.

    Args:
        records (Iterable[TypeDefRecord]): Records in render pre-order.

    Returns:
        NamespaceGroups: Namespace key to ordered record list. Keys appear in
        first-seen order; use `ordered_namespaces` for render order.
    """
    groups: NamespaceGroups = {}
    arena: list[_StructSlot] = []
    index: dict[str, int] = {}

    for record in records:
        namespace: str = record.namespace_key
        group: list[TypeDefRecord] = groups.setdefault(namespace, [])

        match record.kind:
            case RecordKind.STRUCT:
                if record.name in index:
                    logger.debug("Struct %r redeclared; keeping the last declaration", record.name)
                    arena[index[record.name]] = _StructSlot(namespace, record)
                else:
                    index[record.name] = len(arena)
                    arena.append(_StructSlot(namespace, record))
            case RecordKind.IMPL:
                pos: int | None = index.get(record.name)
                if pos is None:
                    logger.debug("Dropping impl block %r: no matching struct", record.name)
                    continue
                slot: _StructSlot = arena[pos]
                slot.record = _append_member_block(slot.record, record.definition)
            case _:
                group.append(record)

    structs_by_namespace: dict[str, list[TypeDefRecord]] = {}
    for slot in arena:
        structs_by_namespace.setdefault(slot.namespace, []).append(slot.record)
    for namespace, structs in structs_by_namespace.items():
        groups[namespace] = structs + groups[namespace]

    logger.debug(
        "Grouped records into %d namespace(s), %d class(es)",
        len(groups),
        len(arena),
    )
    return groups


def namespace_sort_key(namespace: str) -> tuple[bool, str]:
    """Top-level group first, then lexical by namespace path."""
    return (namespace != TOP_LEVEL_NAMESPACE, namespace)


def ordered_namespaces(
    groups: Mapping[str, list[TypeDefRecord]],
) -> list[tuple[str, list[TypeDefRecord]]]:
    """Return namespace groups in render order.

    Args:
        groups (Mapping[str, list[TypeDefRecord]]): Output of `group_records`.

    Returns:
        list[tuple[str, list[TypeDefRecord]]]: ``(namespace_key, records)`` pairs.
    """
    return sorted(groups.items(), key=lambda item: namespace_sort_key(item[0]))
