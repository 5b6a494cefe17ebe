# topmark:header:start
#
#   project      : DtsGen
#   file         : getters.py
#   file_relpath : src/dtsgen/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape and, on mismatch, records a
**warning** in a `DiagnosticLog` (and logs it) instead of raising, so user
mistakes are surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from dtsgen.config.logging import get_logger

if TYPE_CHECKING:
    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.types import TomlTable
    from dtsgen.core.diagnostics import DiagnosticLog

logger: DtsgenLogger = get_logger(__name__)


def _warn_type(
    where: str,
    key: str,
    expected: str,
    value: object,
    diagnostics: DiagnosticLog,
) -> None:
    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value}")


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Source label used in messages (e.g. ``pyproject.toml[tool.dtsgen]``).
        diagnostics (DiagnosticLog): Log receiving warnings.

    Returns:
        str | None: The value, or None when absent or of the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn_type(where, key, "string", value, diagnostics)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Source label used in messages.
        diagnostics (DiagnosticLog): Log receiving warnings.

    Returns:
        bool | None: The value, or None when absent or of the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn_type(where, key, "boolean", value, diagnostics)
    return None


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key of ``table`` not in ``known``."""
    for key in sorted(set(table) - known):
        logger.warning("Unknown key %r in %s", key, where)
        diagnostics.add_warning(f"Unknown key '{key}' in {where} (ignored)")
