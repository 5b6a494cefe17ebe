# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Public configuration surface for DtsGen.

Build configs with `MutableConfig` (mutable), then `freeze()` into a `Config`
for `dtsgen.api.generate`. Do not mutate a frozen `Config`; call
`Config.thaw()`, edit, and `freeze()` again.
"""

from __future__ import annotations

from dtsgen.config import logging
from dtsgen.config.model import Config, MutableConfig
from dtsgen.config.paths import default_intermediate_path
from dtsgen.config.types import FileWriteStrategy, OutputTarget

__all__ = [
    "Config",
    "FileWriteStrategy",
    "MutableConfig",
    "OutputTarget",
    "default_intermediate_path",
    "logging",
]
