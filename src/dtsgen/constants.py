# topmark:header:start
#
#   project      : DtsGen
#   file         : constants.py
#   file_relpath : src/dtsgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""DtsGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DTSGEN_VERSION: str = get_version("dtsgen")

# Namespace key of records without a `js_mod`. Never a valid dotted module path.
TOP_LEVEL_NAMESPACE: str = "__TOP_LEVEL_MODULE__"

DEFAULT_TYPE_DEF_HEADER: str = "/* auto-generated by OHOS-RS */\n/* eslint-disable */\n\n"

DEFAULT_DIST_DIR: str = "dist"
DEFAULT_DTS_FILENAME: str = "index.d.ts"

# Environment variable through which the compile step publishes the record file path.
TYPE_DEF_TMP_PATH_ENV: str = "TYPE_DEF_TMP_PATH"
TYPE_DEF_TMP_SUFFIX: str = ".napi_type_def.tmp"

# Bundled compatibility fragments inside the package `dtsgen.fragments`:
FRAGMENTS_PACKAGE: str = "dtsgen.fragments"
ABORT_SIGNAL_FRAGMENT: str = "abort-signal.d.ts"
EXTERNAL_OBJECT_FRAGMENT: str = "external-object.d.ts"

DEFAULT_TOML_CONFIG_NAME: str = "dtsgen.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "dtsgen"
