# topmark:header:start
#
#   project      : DtsGen
#   file         : paths.py
#   file_relpath : src/dtsgen/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Pure helpers for path normalization.

Key behaviors:
    - ``abs_path_from(base, raw)``: resolve ``raw`` against ``base`` when
      relative; always returns an absolute, resolved `pathlib.Path`.
    - ``default_intermediate_path(package, manifest)``: the location where the
      compile step writes the type-def records for a package,
      ``<tmp>/<package>-<hash8>.napi_type_def.tmp`` where ``hash8`` is the first
      eight hex digits of the SHA-256 of the manifest path.
"""

from __future__ import annotations

import hashlib
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from dtsgen.constants import TYPE_DEF_TMP_SUFFIX

if TYPE_CHECKING:
    from os import PathLike


def abs_path_from(base: Path, raw: str | PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw)
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


def default_intermediate_path(
    package_name: str,
    manifest_path: str | PathLike[str],
    tmp_dir: Path | None = None,
) -> Path:
    """Return the intermediate type-def file path for a package.

    The manifest path is hashed as given (no normalization), so it must be
    spelled the way the compile step saw it.

    Args:
        package_name (str): Name of the native package.
        manifest_path (str | PathLike[str]): Path of the package manifest.
        tmp_dir (Path | None): Temp directory; defaults to the system temp dir.

    Returns:
        Path: Path of the intermediate record file.
    """
    digest: str = hashlib.sha256(str(manifest_path).encode("utf-8")).hexdigest()
    base: Path = tmp_dir if tmp_dir is not None else Path(tempfile.gettempdir())
    return base / f"{package_name}-{digest[:8]}{TYPE_DEF_TMP_SUFFIX}"
