# topmark:header:start
#
#   project      : DtsGen
#   file         : loaders.py
#   file_relpath : src/dtsgen/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading DtsGen configuration from:
- ``dtsgen.toml`` (keys in the root table), and
- ``pyproject.toml`` (keys under ``[tool.dtsgen]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dtsgen.config.logging import get_logger
from dtsgen.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.types import TomlTable

logger: DtsgenLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_dtsgen_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DtsGen settings table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.dtsgen]`` (None when absent); for
    any other file the root table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section: Any = tool.get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def load_config_table(path: Path) -> TomlTable | None:
    """Read the DtsGen settings table from ``path``.

    Read or parse failures are logged and reported as None, like an absent
    section.

    Args:
        path (Path): ``dtsgen.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable | None: The settings table, or None.
    """
    try:
        data: TomlTable = load_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None
    return extract_dtsgen_table(path, data)


def discover_config_file(directory: Path) -> Path | None:
    """Find the project config file in ``directory``.

    ``dtsgen.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it has a ``[tool.dtsgen]`` section.

    Args:
        directory (Path): Directory to search (not its parents).

    Returns:
        Path | None: The config file, or None.
    """
    candidate: Path = directory / DEFAULT_TOML_CONFIG_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = directory / PYPROJECT_TOML_NAME
    if pyproject.is_file() and load_config_table(pyproject) is not None:
        return pyproject
    return None
