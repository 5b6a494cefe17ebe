# topmark:header:start
#
#   project      : DtsGen
#   file         : main.py
#   file_relpath : src/dtsgen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""DtsGen command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the project console; subcommands read them from
there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtsgen.cli.commands.generate import generate_command
from dtsgen.cli.commands.version import version_command
from dtsgen.cli.console import ClickConsole
from dtsgen.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from dtsgen.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from dtsgen.cli.console import ConsoleLike
    from dtsgen.config.logging import DtsgenLogger

logger: DtsgenLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(
        color_mode_override=effective_color_mode, output_format=None
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Generate TypeScript declaration files from native-binding type records.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DtsGen CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'dtsgen generate --input FILE' to write dist/index.d.ts.")


cli.add_command(generate_command)
cli.add_command(version_command)
