# topmark:header:start
#
#   project      : DtsGen
#   file         : version.py
#   file_relpath : src/dtsgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""DtsGen `version` command.

Prints the current DtsGen version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dtsgen.cli.options import OutputFormat, get_effective_verbosity, output_format_option
from dtsgen.constants import DTSGEN_VERSION

if TYPE_CHECKING:
    from dtsgen.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DtsGen.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DtsGen.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": DTSGEN_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DtsGen version:", bold=True, underline=True))
        console.print(f"    {console.styled(DTSGEN_VERSION, bold=True)}")
    else:
        console.print(console.styled(DTSGEN_VERSION, bold=True))
