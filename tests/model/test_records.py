# topmark:header:start
#
#   project      : DtsGen
#   file         : test_records.py
#   file_relpath : tests/model/test_records.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Tests for the `TypeDefRecord` model."""

from __future__ import annotations

import pytest

from dtsgen.constants import TOP_LEVEL_NAMESPACE
from dtsgen.model.records import RecordKind, TypeDefRecord
from tests.conftest import parametrize, rec


@parametrize("tag", [k.value for k in RecordKind])
def test_from_tag_accepts_every_wire_tag(tag: str) -> None:
    assert RecordKind.from_tag(tag).value == tag


@parametrize("tag", ["Struct", "class", None, 1])
def test_from_tag_rejects_unknown(tag: object) -> None:
    with pytest.raises(ValueError):
        RecordKind.from_tag(tag)


def test_from_dict_defaults_optional_fields() -> None:
    record: TypeDefRecord = TypeDefRecord.from_dict({"kind": "fn", "name": "f", "def": "x"})
    assert record.original_name is None
    assert record.doc_comment is None
    assert record.namespace is None
    assert record.namespace_key == TOP_LEVEL_NAMESPACE


def test_to_dict_uses_wire_keys() -> None:
    data = rec("struct", "W", "a: 1", original_name="RawW", js_doc="/** d */", js_mod="m")
    assert TypeDefRecord.from_dict(data).to_dict() == data


def test_alias_name_only_when_distinct() -> None:
    assert TypeDefRecord(RecordKind.STRUCT, "W", original_name="W").alias_name is None
    assert TypeDefRecord(RecordKind.STRUCT, "W").alias_name is None
    assert TypeDefRecord(RecordKind.STRUCT, "W", original_name="V").alias_name == "V"


def test_namespace_key_uses_module_path() -> None:
    assert TypeDefRecord(RecordKind.FN, "f", namespace="net.http").namespace_key == "net.http"
