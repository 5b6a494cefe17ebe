# topmark:header:start
#
#   project      : DtsGen
#   file         : model.py
#   file_relpath : src/dtsgen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the API and the writer.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layers, lowest precedence first:
    1. runtime defaults (`MutableConfig.from_defaults`);
    2. the discovered project config (``dtsgen.toml`` or ``[tool.dtsgen]``);
    3. explicit ``--config`` files, in order;
    4. CLI/API arguments (`MutableConfig.apply_args`).

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - CLI/API paths are resolved against the invocation CWD.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from dtsgen.config.getters import (
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    warn_unknown_keys,
)
from dtsgen.config.keys import Toml
from dtsgen.config.loaders import discover_config_file, load_config_table
from dtsgen.config.logging import get_logger
from dtsgen.config.paths import abs_path_from, default_intermediate_path
from dtsgen.config.types import FileWriteStrategy, OutputTarget
from dtsgen.constants import DEFAULT_DIST_DIR, DEFAULT_DTS_FILENAME
from dtsgen.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.types import ArgsLike, TomlTable

logger: DtsgenLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DtsGen.

    Attributes:
        input_path (Path | None): Intermediate record file, when given explicitly.
        package_name (str | None): Package name used to derive the record file path.
        manifest_path (str | None): Manifest path used to derive the record file path.
        dist_dir (Path): Output directory.
        filename (str): Output file name inside ``dist_dir``.
        header (str): Extra header text placed after the default banner.
        const_enum (bool): Emit enums as ``const enum``.
        output_target (OutputTarget): Where to send the declarations.
        write_strategy (FileWriteStrategy): How to write when targeting a file.
        apply_changes (bool): False for a dry run.
        config_files (tuple[Path, ...]): Config sources that were merged.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    input_path: Path | None
    package_name: str | None
    manifest_path: str | None
    dist_dir: Path
    filename: str
    header: str
    const_enum: bool
    output_target: OutputTarget
    write_strategy: FileWriteStrategy
    apply_changes: bool
    config_files: tuple[Path, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def dest_path(self) -> Path:
        """Destination path of the declaration file."""
        return self.dist_dir / self.filename

    def resolve_input_path(self) -> Path | None:
        """Return the intermediate record file to read.

        An explicit ``input_path`` wins; otherwise the path is derived from the
        package name and manifest. None when neither is configured.
        """
        if self.input_path is not None:
            return self.input_path
        if self.package_name and self.manifest_path:
            return default_intermediate_path(self.package_name, self.manifest_path)
        return None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            input_path=self.input_path,
            package_name=self.package_name,
            manifest_path=self.manifest_path,
            dist_dir=self.dist_dir,
            filename=self.filename,
            header=self.header,
            const_enum=self.const_enum,
            output_target=self.output_target,
            write_strategy=self.write_strategy,
            apply_changes=self.apply_changes,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder; see the module docstring for layering."""

    input_path: Path | None = None
    package_name: str | None = None
    manifest_path: str | None = None
    dist_dir: Path = field(default_factory=lambda: Path(DEFAULT_DIST_DIR))
    filename: str = DEFAULT_DTS_FILENAME
    header: str = ""
    const_enum: bool = True
    output_target: OutputTarget = OutputTarget.FILE
    write_strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC
    apply_changes: bool = True
    config_files: list[Path] = field(default_factory=list)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls, cwd: Path | None = None) -> MutableConfig:
        """Return a builder holding the runtime defaults.

        Args:
            cwd (Path | None): Base for the default ``dist`` directory.
        """
        base: Path = cwd if cwd is not None else Path.cwd()
        return cls(dist_dir=abs_path_from(base, DEFAULT_DIST_DIR))

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        config_files: Iterable[Path] = (),
        no_config: bool = False,
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build a config from all layers.

        Args:
            cwd (Path | None): Invocation directory (defaults to the process CWD).
            config_files (Iterable[Path]): Explicit config files, merged in order.
            no_config (bool): Skip discovery of the project config in ``cwd``.
            args (ArgsLike | None): CLI/API overrides, see `apply_args`.

        Returns:
            MutableConfig: The merged builder.
        """
        base: Path = cwd if cwd is not None else Path.cwd()
        draft: MutableConfig = cls.from_defaults(base)

        if not no_config:
            discovered: Path | None = discover_config_file(base)
            if discovered is not None:
                draft.merge_file(discovered)

        for path in config_files:
            draft.merge_file(abs_path_from(base, path), required=True)

        if args:
            draft.apply_args(args, cwd=base)
        return draft

    def merge_file(self, path: Path, *, required: bool = False) -> MutableConfig:
        """Merge the settings of one config file.

        Args:
            path (Path): Absolute path of ``dtsgen.toml`` / ``pyproject.toml``.
            required (bool): Record a warning when the file yields no settings.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        table: TomlTable | None = load_config_table(path)
        if table is None:
            if required:
                self.diagnostics.add_warning(f"No DtsGen settings found in {path}")
            return self
        logger.debug("Merging config from %s", path)
        self.config_files.append(path)
        return self.merge_toml(table, base_dir=path.parent, where=str(path))

    def merge_toml(self, table: TomlTable, *, base_dir: Path, where: str) -> MutableConfig:
        """Merge a parsed settings table; relative paths resolve against ``base_dir``.

        Args:
            table (TomlTable): The DtsGen settings table.
            base_dir (Path): Directory of the declaring config file.
            where (str): Source label for diagnostics.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        diags: DiagnosticLog = self.diagnostics
        warn_unknown_keys(table, Toml.ALL_KEYS, where=where, diagnostics=diags)

        def _str(key: str) -> str | None:
            return get_string_value_or_none_checked(table, key, where=where, diagnostics=diags)

        if (raw_input := _str(Toml.KEY_INPUT)) is not None:
            self.input_path = abs_path_from(base_dir, raw_input)
        if (package := _str(Toml.KEY_PACKAGE)) is not None:
            self.package_name = package
        if (manifest := _str(Toml.KEY_MANIFEST)) is not None:
            self.manifest_path = str(abs_path_from(base_dir, manifest))
        if (dist := _str(Toml.KEY_DIST)) is not None:
            self.dist_dir = abs_path_from(base_dir, dist)
        if (filename := _str(Toml.KEY_FILENAME)) is not None:
            self.filename = filename
        if (header := _str(Toml.KEY_HEADER)) is not None:
            self.header = header
        if (header_file := _str(Toml.KEY_HEADER_FILE)) is not None:
            self.load_header_file(abs_path_from(base_dir, header_file))
        if (strategy_name := _str(Toml.KEY_WRITE_STRATEGY)) is not None:
            self.set_write_strategy(strategy_name, where=where)

        const_enum: bool | None = get_bool_value_or_none_checked(
            table, Toml.KEY_CONST_ENUM, where=where, diagnostics=diags
        )
        if const_enum is not None:
            self.const_enum = const_enum
        return self

    def load_header_file(self, path: Path) -> None:
        """Use the contents of ``path`` as the extra header text."""
        try:
            self.header = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot read header file %s: %s", path, exc)
            self.diagnostics.add_warning(f"Cannot read header file {path}: {exc}")

    def set_write_strategy(self, name: str, *, where: str) -> None:
        """Set the write strategy by name, warning on unknown names."""
        strategy: FileWriteStrategy | None = FileWriteStrategy.from_name(name)
        if strategy is None:
            logger.warning("Unknown write strategy %r in %s", name, where)
            self.diagnostics.add_warning(f"Unknown write strategy '{name}' in {where} (ignored)")
            return
        self.write_strategy = strategy

    def apply_args(self, args: ArgsLike, *, cwd: Path) -> MutableConfig:
        """Apply CLI/API overrides. Keys with a None value are ignored.

        Recognized keys: ``input``, ``package``, ``manifest``, ``dist``,
        ``filename``, ``header``, ``header_file``, ``const_enum``,
        ``write_strategy``, ``stdout``, ``dry_run``.

        Args:
            args (ArgsLike): Overrides.
            cwd (Path): Base for relative paths.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        get = args.get
        if get("input") is not None:
            self.input_path = abs_path_from(cwd, get("input"))
        if get("package") is not None:
            self.package_name = str(get("package"))
        if get("manifest") is not None:
            self.manifest_path = str(abs_path_from(cwd, get("manifest")))
        if get("dist") is not None:
            self.dist_dir = abs_path_from(cwd, get("dist"))
        if get("filename") is not None:
            self.filename = str(get("filename"))
        if get("header") is not None:
            self.header = str(get("header"))
        if get("header_file") is not None:
            self.load_header_file(abs_path_from(cwd, get("header_file")))
        if get("const_enum") is not None:
            self.const_enum = bool(get("const_enum"))
        if get("write_strategy") is not None:
            self.set_write_strategy(str(get("write_strategy")), where="arguments")
        if get("stdout"):
            self.output_target = OutputTarget.STDOUT
        if get("dry_run"):
            self.apply_changes = False
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            input_path=self.input_path,
            package_name=self.package_name,
            manifest_path=self.manifest_path,
            dist_dir=self.dist_dir,
            filename=self.filename,
            header=self.header,
            const_enum=self.const_enum,
            output_target=self.output_target,
            write_strategy=self.write_strategy,
            apply_changes=self.apply_changes,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.to_tuple(),
        )
