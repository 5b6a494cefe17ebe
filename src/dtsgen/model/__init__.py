# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Record model for the intermediate type-def stream."""

from __future__ import annotations

from dtsgen.model.records import RecordKind, TypeDefRecord

__all__ = [
    "RecordKind",
    "TypeDefRecord",
]
