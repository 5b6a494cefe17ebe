# topmark:header:start
#
#   project      : DtsGen
#   file         : types.py
#   file_relpath : src/dtsgen/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Lightweight config types and aliases.

Keep side effects out of this module so it stays safe for low-level imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Parsed TOML table, as plain Python containers.
TomlTable = dict[str, Any]

# Generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class OutputTarget(str, Enum):
    """Available targets for the generated declarations."""

    FILE = "Write to file"
    STDOUT = "Write to STDOUT"

    @classmethod
    def from_name(cls, key_name: str | None) -> OutputTarget | None:
        """Find the member by its case-insensitive name (e.g., 'file', 'stdout').

        Args:
            key_name (str | None): The member name or None.

        Returns:
            OutputTarget | None: The matching member, or None if absent or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper())


class FileWriteStrategy(str, Enum):
    """Available strategies for writing the declaration file."""

    ATOMIC = "Safe atomic writer (default)"
    INPLACE = "Fast in-place writer"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Find the member by its case-insensitive name (e.g., 'atomic', 'inplace').

        Args:
            key_name (str | None): The member name or None.

        Returns:
            FileWriteStrategy | None: The matching member, or None if absent or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper().replace("-", "").replace("_", ""))
