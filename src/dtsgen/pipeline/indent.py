# topmark:header:start
#
#   project      : DtsGen
#   file         : indent.py
#   file_relpath : src/dtsgen/pipeline/indent.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Brace-depth re-indentation of rendered declaration text.

This is a line heuristic, not a parser: nesting is inferred only from a
trailing ``{`` or ``}`` on each trimmed line. A line that carries an unmatched
brace in the middle of ordinary text is not recognized as opening or closing a
block.
"""

from __future__ import annotations

INDENT_WIDTH: int = 2


def correct_indent(text: str, indent: int = 0) -> str:
    """Re-indent ``text`` using brace-depth tracking.

    Rules, per trimmed line:
        - blank lines are emitted empty and leave the depth unchanged;
        - a line starting with ``*`` continues a doc comment: it never changes
          the depth and gets one extra space so the asterisks line up under
          the opening ``/**``;
        - a line ending with ``{`` is indented at the current depth, then the
          depth increases;
        - a line ending with ``}`` decreases the depth (never below zero), then
          is indented at the new depth.

    Args:
        text (str): Rendered, possibly multi-line text.
        indent (int): Base indent width in spaces.

    Returns:
        str: The re-indented text; every line ends with ``\\n``.
    """
    out: list[str] = []
    depth: int = 0
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for raw in lines:
        line: str = raw.strip()
        if not line:
            out.append("\n")
            continue

        in_doc_comment: bool = line.startswith("*")
        if in_doc_comment:
            width: int = indent + depth * INDENT_WIDTH + 1
        elif line.endswith("{"):
            width = indent + depth * INDENT_WIDTH
            depth += 1
        else:
            if line.endswith("}") and depth > 0:
                depth -= 1
            width = indent + depth * INDENT_WIDTH

        out.append(f"{' ' * width}{line}\n")
    return "".join(out)
