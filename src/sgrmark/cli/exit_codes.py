# topmark:header:start
#
#   project      : SgrMark
#   file         : exit_codes.py
#   file_relpath : src/sgrmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SgrMark CLI.

SgrMark aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. Click's own usage errors keep Click's exit
code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SgrMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Invalid input data (undecodable text, unknown color).
            Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: Writing the rendered output failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
