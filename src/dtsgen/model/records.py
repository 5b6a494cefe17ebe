# topmark:header:start
#
#   project      : DtsGen
#   file         : records.py
#   file_relpath : src/dtsgen/model/records.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Typed representation of one intermediate type-def record.

Each exported item of the native module (constant, enum, function, class
skeleton, class member block, interface, string-backed enum) is serialized
during compilation as one JSON object per line:

```json
{"kind": "struct", "name": "Widget", "original_name": null, "def": "",
 "js_doc": null, "js_mod": "ui"}
```

`TypeDefRecord` is the immutable Python view of such a line. The wire keys
``def``, ``js_doc`` and ``js_mod`` map to the attributes ``definition``,
``doc_comment`` and ``namespace``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from dtsgen.constants import TOP_LEVEL_NAMESPACE

if TYPE_CHECKING:
    from collections.abc import Mapping


class RecordKind(str, Enum):
    """Closed set of record kinds; values are the wire tags."""

    CONST = "const"
    ENUM = "enum"
    STRING_ENUM = "string_enum"
    INTERFACE = "interface"
    FN = "fn"
    STRUCT = "struct"
    IMPL = "impl"

    @classmethod
    def from_tag(cls, tag: object) -> RecordKind:
        """Return the kind for a wire tag.

        Args:
            tag (object): Decoded ``kind`` value.

        Returns:
            RecordKind: The matching member.

        Raises:
            ValueError: If ``tag`` is not a known kind.
        """
        for member in cls:
            if member.value == tag:
                return member
        raise ValueError(f"unknown record kind: {tag!r}")


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value: Any = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"field {key!r} must be a string or null, got {type(value).__name__}")


def _required_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value: Any = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TypeDefRecord:
    """One exported-symbol description.

    Attributes:
        kind (RecordKind): Symbol kind.
        name (str): Emitted (possibly renamed) identifier. Impl records share it
            with their Struct.
        definition (str): Opaque body text: member list, signature or variant list.
        original_name (str | None): Alternate identifier; an alias is emitted when it
            differs from ``name``.
        doc_comment (str | None): Documentation emitted verbatim before the declaration.
        namespace (str | None): Dotted module path; ``None`` means top level.
    """

    kind: RecordKind
    name: str
    definition: str = ""
    original_name: str | None = None
    doc_comment: str | None = None
    namespace: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TypeDefRecord:
        """Build a record from one decoded JSON object.

        Args:
            data (Mapping[str, Any]): Decoded record object.

        Returns:
            TypeDefRecord: The validated record.

        Raises:
            TypeError: If ``data`` is not an object or a field has the wrong type.
            ValueError: If a required field is missing or ``kind`` is unknown.
        """
        if not isinstance(data, dict):
            raise TypeError(f"record must be a JSON object, got {type(data).__name__}")
        if "kind" not in data:
            raise ValueError("missing field 'kind'")
        return cls(
            kind=RecordKind.from_tag(data["kind"]),
            name=_required_str(data, "name"),
            definition=_required_str(data, "def"),
            original_name=_optional_str(data, "original_name"),
            doc_comment=_optional_str(data, "js_doc"),
            namespace=_optional_str(data, "js_mod"),
        )

    def to_dict(self) -> dict[str, str | None]:
        """Return the wire mapping of this record."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "original_name": self.original_name,
            "def": self.definition,
            "js_doc": self.doc_comment,
            "js_mod": self.namespace,
        }

    @property
    def namespace_key(self) -> str:
        """Namespace group key; the top-level sentinel when ``namespace`` is unset."""
        return self.namespace if self.namespace is not None else TOP_LEVEL_NAMESPACE

    @property
    def alias_name(self) -> str | None:
        """``original_name`` when it differs from ``name``, else None."""
        if self.original_name is not None and self.original_name != self.name:
            return self.original_name
        return None

    @property
    def is_struct(self) -> bool:
        """Whether this is a class skeleton record."""
        return self.kind is RecordKind.STRUCT
