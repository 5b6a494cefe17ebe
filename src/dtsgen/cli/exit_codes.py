# topmark:header:start
#
#   project      : DtsGen
#   file         : exit_codes.py
#   file_relpath : src/dtsgen/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 DtsGen authors
#
# topmark:header:end

"""Exit codes for the DtsGen CLI.

DtsGen aligns with the BSD `sysexits` convention so that build tooling
invoking it can interpret failures consistently. A missing intermediate
record file is not a failure and exits with `SUCCESS`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DtsGen CLI.

    Attributes:
        SUCCESS: Declarations generated, previewed, or skipped for lack of input.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed intermediate record stream. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An explicitly named file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: The record file could not be read, or the declaration file
            could not be written. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
