# topmark:header:start
#
#   project      : DtsGen
#   file         : strategies_dtsgen.py
#   file_relpath : tests/strategies_dtsgen.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating type-def record streams.

The generated definitions are small, brace-free member lists so that the
re-indentation step never interacts with the generated content.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from dtsgen.model.records import RecordKind, TypeDefRecord

Draw = Callable[[st.SearchStrategy[Any]], Any]

IDENTIFIERS: st.SearchStrategy[str] = st.from_regex(r"[A-Z][A-Za-z0-9]{0,7}", fullmatch=True)
MEMBERS: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9]{0,6}\(\): void", fullmatch=True)
NAMESPACES: st.SearchStrategy[str | None] = st.sampled_from([None, None, "ui", "net.http"])

NON_CLASS_KINDS: tuple[RecordKind, ...] = (
    RecordKind.CONST,
    RecordKind.ENUM,
    RecordKind.STRING_ENUM,
    RecordKind.INTERFACE,
    RecordKind.FN,
)


@st.composite
def s_struct_with_impls(draw: Draw) -> list[TypeDefRecord]:
    """One Struct record followed by 0..3 Impl records of the same name."""
    name: str = draw(IDENTIFIERS)
    namespace: str | None = draw(NAMESPACES)
    impls: list[str] = draw(st.lists(MEMBERS, max_size=3))
    out: list[TypeDefRecord] = [
        TypeDefRecord(kind=RecordKind.STRUCT, name=name, namespace=namespace)
    ]
    out.extend(
        TypeDefRecord(kind=RecordKind.IMPL, name=name, definition=member, namespace=namespace)
        for member in impls
    )
    return out


@st.composite
def s_plain_record(draw: Draw) -> TypeDefRecord:
    """A non-class record with a simple, brace-free definition."""
    kind: RecordKind = draw(st.sampled_from(NON_CLASS_KINDS))
    name: str = "f" + draw(IDENTIFIERS) if kind is RecordKind.FN else draw(IDENTIFIERS)
    definitions: dict[RecordKind, str] = {
        RecordKind.CONST: f"export const {name}: number",
        RecordKind.ENUM: "A = 0,\nB = 1",
        RecordKind.STRING_ENUM: 'A = "a",\nB = "b"',
        RecordKind.INTERFACE: "value: number",
        RecordKind.FN: f"function {name}(): void",
    }
    return TypeDefRecord(
        kind=kind,
        name=name,
        definition=definitions[kind],
        namespace=draw(NAMESPACES),
    )


@st.composite
def s_record_stream(draw: Draw) -> list[TypeDefRecord]:
    """A stream of classes (with distinct names) and plain records."""
    classes: list[list[TypeDefRecord]] = draw(
        st.lists(
            s_struct_with_impls(),
            max_size=4,
            unique_by=lambda group: group[0].name,
        )
    )
    plain: list[TypeDefRecord] = draw(st.lists(s_plain_record(), max_size=6))
    stream: list[TypeDefRecord] = [r for group in classes for r in group] + plain
    return draw(st.permutations(stream))
