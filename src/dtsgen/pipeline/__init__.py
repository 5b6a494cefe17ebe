# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Declaration assembly pipeline.

Steps: `reader` → `merger` → `renderer` (with `indent`) → `substitutions`,
driven by `assembler`; `writer` persists the result.
"""

from __future__ import annotations

from dtsgen.pipeline.assembler import AssemblyResult, assemble, assemble_records

__all__ = [
    "AssemblyResult",
    "assemble",
    "assemble_records",
]
