# topmark:header:start
#
#   project      : DtsGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Pytest configuration for the DtsGen test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `dtsgen.config.MutableConfig`, then `freeze()` into a
    `dtsgen.config.Config` for `dtsgen.api.generate`.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from dtsgen.config import MutableConfig, logging
from dtsgen.constants import TYPE_DEF_TMP_PATH_ENV

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from dtsgen.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_dtsgen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of the tests.

    ``DTSGEN_LOG_LEVEL`` would force log noise and ``TYPE_DEF_TMP_PATH`` would
    feed the CLI ``--input`` option.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(TYPE_DEF_TMP_PATH_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory (no config file to discover).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def rec(
    kind: str,
    name: str,
    definition: str = "",
    *,
    original_name: str | None = None,
    js_doc: str | None = None,
    js_mod: str | None = None,
) -> dict[str, Any]:
    """Return one wire record mapping."""
    return {
        "kind": kind,
        "name": name,
        "original_name": original_name,
        "def": definition,
        "js_doc": js_doc,
        "js_mod": js_mod,
    }


def write_records(path: Path, records: Iterable[Mapping[str, Any] | str]) -> Path:
    """Write a record file: mappings as JSON lines, strings verbatim.

    Returns:
        Path: ``path``.
    """
    lines: list[str] = [
        item if isinstance(item, str) else json.dumps(dict(item)) for item in records
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def make_config(tmp_path: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` rooted in ``tmp_path``, without config discovery.

    Args:
        tmp_path (Path): Base directory (relative paths resolve against it).
        **overrides (Any): `MutableConfig.apply_args` keys.

    Returns:
        Config: The frozen configuration.
    """
    return MutableConfig.load_merged(cwd=tmp_path, no_config=True, args=overrides).freeze()
