# topmark:header:start
#
#   project      : DtsGen
#   file         : keys.py
#   file_relpath : src/dtsgen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Canonical TOML key names for DtsGen configuration.

These keys are read from the root table of ``dtsgen.toml`` and from
``[tool.dtsgen]`` in ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by DtsGen configuration."""

    # Intermediate record file
    KEY_INPUT: Final[str] = "input"
    KEY_PACKAGE: Final[str] = "package"
    KEY_MANIFEST: Final[str] = "manifest"

    # Destination
    KEY_DIST: Final[str] = "dist"
    KEY_FILENAME: Final[str] = "filename"
    KEY_WRITE_STRATEGY: Final[str] = "write_strategy"

    # Rendering
    KEY_HEADER: Final[str] = "header"
    KEY_HEADER_FILE: Final[str] = "header_file"
    KEY_CONST_ENUM: Final[str] = "const_enum"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_INPUT,
            KEY_PACKAGE,
            KEY_MANIFEST,
            KEY_DIST,
            KEY_FILENAME,
            KEY_WRITE_STRATEGY,
            KEY_HEADER,
            KEY_HEADER_FILE,
            KEY_CONST_ENUM,
        }
    )
