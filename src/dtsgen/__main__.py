# topmark:header:start
#
#   project      : DtsGen
#   file         : __main__.py
#   file_relpath : src/dtsgen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Module entry point for running DtsGen via ``python -m dtsgen``.

It delegates directly to :func:`dtsgen.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how DtsGen is launched.

Examples:
    Generate declarations from the record file named in the environment::

        python -m dtsgen generate --dist dist
"""

from __future__ import annotations

from dtsgen.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
