# topmark:header:start
#
#   project      : DtsGen
#   file         : substitutions.py
#   file_relpath : src/dtsgen/pipeline/substitutions.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Substitution and header pass over the assembled declaration body.

A small, fixed set of rewrites for types the target runtime does not support:

1. ``Buffer`` (whole word) is replaced by ``ArrayBuffer``.
2. ``AbortSignal`` (whole word) pulls in a bundled ``AbortSignal`` /
   ``AbortController`` declaration fragment.
3. When 1 or 2 fired, two newlines separate the header from the body.
4. ``ExternalObject<`` pulls in the bundled ``ExternalObject<T>`` class.

Steps 1 and 2 also produce INFO diagnostics for the user. A fragment that is
already present in the header or body is not appended again, so running the
pass over its own output changes nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cache
from importlib.resources import files
from typing import Final

from dtsgen.config.logging import get_logger
from dtsgen.constants import (
    ABORT_SIGNAL_FRAGMENT,
    EXTERNAL_OBJECT_FRAGMENT,
    FRAGMENTS_PACKAGE,
)
from dtsgen.core.diagnostics import Diagnostic, DiagnosticLevel

logger = get_logger(__name__)

BUFFER_RE: Final[re.Pattern[str]] = re.compile(r"\bBuffer\b")
BUFFER_REPLACEMENT: Final[str] = "ArrayBuffer"
ABORT_SIGNAL_RE: Final[re.Pattern[str]] = re.compile(r"\bAbortSignal\b")
EXTERNAL_OBJECT_MARKER: Final[str] = "ExternalObject<"

BUFFER_NOTE: Final[str] = (
    "You're currently using Buffer. However, ArkTS doesn't provide robust support "
    "for buffer, so it's advisable to use ArrayBuffer directly. "
    "For more detail info: https://ohos.rs/docs/more/buffer.html"
)
ABORT_SIGNAL_NOTE: Final[str] = (
    "You're currently using AbortController, which isn't supported by Harmony. "
    "You could consider using @ohos-rs/abort-controller as an alternative. "
    "For more detail info: https://github.com/ohos-rs/abort-controller"
)


@cache
def load_fragment(name: str) -> str:
    """Return the text of a bundled declaration fragment.

    Args:
        name (str): Resource file name inside ``dtsgen.fragments``.

    Returns:
        str: The fragment text (UTF-8).
    """
    return files(FRAGMENTS_PACKAGE).joinpath(name).read_text(encoding="utf-8")


@dataclass(frozen=True)
class SubstitutionResult:
    """Outcome of the substitution pass.

    Attributes:
        header (str): Caller prefix plus accumulated fragments.
        body (str): Body after type rewrites.
        diagnostics (tuple[Diagnostic, ...]): Advisory notes for the user.
    """

    header: str
    body: str
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def text(self) -> str:
        """Final declaration text: header followed by body."""
        return self.header + self.body


def _already_present(fragment: str, *texts: str) -> bool:
    needle: str = fragment.strip()
    return any(needle in t for t in texts)


def apply_substitutions(body: str, header: str = "") -> SubstitutionResult:
    """Rewrite unsupported types in ``body`` and grow ``header`` as needed.

    Args:
        body (str): The fully assembled declaration body.
        header (str): Caller-supplied header prefix.

    Returns:
        SubstitutionResult: Rewritten body, final header and diagnostics.
    """
    diagnostics: list[Diagnostic] = []
    header_grew: bool = False

    body, n_buffer = BUFFER_RE.subn(BUFFER_REPLACEMENT, body)
    if n_buffer:
        header_grew = True
        logger.info("Replaced %d occurrence(s) of Buffer with ArrayBuffer", n_buffer)
        diagnostics.append(Diagnostic(DiagnosticLevel.INFO, BUFFER_NOTE))

    if ABORT_SIGNAL_RE.search(body):
        diagnostics.append(Diagnostic(DiagnosticLevel.INFO, ABORT_SIGNAL_NOTE))
        abort_ts: str = load_fragment(ABORT_SIGNAL_FRAGMENT)
        if not _already_present(abort_ts, header, body):
            header_grew = True
            header += abort_ts
            logger.info("Added AbortSignal compatibility declarations to the header")

    if header_grew:
        header += "\n\n"

    if EXTERNAL_OBJECT_MARKER in body:
        external_ts: str = load_fragment(EXTERNAL_OBJECT_FRAGMENT)
        if not _already_present(external_ts, header, body):
            header += external_ts
            logger.debug("Added ExternalObject<T> declaration to the header")

    return SubstitutionResult(header=header, body=body, diagnostics=tuple(diagnostics))
